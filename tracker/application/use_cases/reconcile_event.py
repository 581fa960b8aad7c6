"""ReconcileEventUseCase — apply a calendar event to the matching assignment."""

from __future__ import annotations

import asyncio
import logging

from tracker.application.ports.assignment_repo import AssignmentRepository
from tracker.application.ports.similarity_port import SimilarityScorer
from tracker.domain.entities.assignment import Assignment
from tracker.domain.entities.calendar_event import CalendarEvent
from tracker.domain.errors import NotFoundError
from tracker.domain.policies.address_matching import best_match

logger = logging.getLogger(__name__)


class ReconcileEventUseCase:
    """Finds the assignment an event refers to and flips its scheduled flag."""

    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        scorer: SimilarityScorer,
        score_floor: float = 0.0,
    ):
        self._assignments = assignment_repo
        self._scorer = scorer
        self._floor = score_floor

    async def execute(self, event: CalendarEvent) -> Assignment:
        """Reconcile one event.

        Pipeline:
        1. Load every assignment (hidden ones included)
        2. Fuzzy-match the event address against their addresses
        3. confirmed → scheduled, anything else → unscheduled
        4. Persist the scheduled flag only

        Raises:
            NotFoundError: no assignment scored above the floor.
        """
        assignments = await self._assignments.get_all()
        addresses = [a.address for a in assignments]

        # CPU-bound scan; keep it off the event loop
        result = await asyncio.to_thread(
            best_match, event.address, addresses, self._scorer.score, self._floor
        )

        if not result.found:
            logger.warning(
                "No assignment matched event address %r (%d candidates)",
                event.address, len(assignments),
            )
            raise NotFoundError("no matching assignment")

        assignment = assignments[result.index]
        assignment.scheduled = event.is_confirmed()

        await self._assignments.update_flags(assignment.id, scheduled=assignment.scheduled)

        logger.info(
            "Event %r (%s) → assignment %s %r (score=%.3f, scheduled=%s)",
            event.address, event.status, assignment.id,
            assignment.address, result.score, assignment.scheduled,
        )
        return assignment
