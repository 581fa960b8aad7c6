"""Assignment use cases — creation and flag changes."""

from __future__ import annotations

import logging
from uuid import UUID

from tracker.application.ports.assignment_repo import AssignmentRepository
from tracker.domain.entities.assignment import Assignment
from tracker.domain.errors import NotFoundError

logger = logging.getLogger(__name__)


class CreateAssignmentsUseCase:
    """Persist new assignments exactly as submitted."""

    def __init__(self, assignment_repo: AssignmentRepository):
        self._assignments = assignment_repo

    async def create_one(self, assignment: Assignment) -> Assignment:
        saved = await self._assignments.save(assignment)
        logger.info("Created assignment %s for agent %r", saved.id, saved.agent)
        return saved

    async def create_many(self, assignments: list[Assignment]) -> list[Assignment]:
        saved = await self._assignments.save_many(assignments)
        logger.info("Batch created %d assignments", len(saved))
        return saved


class SetAssignmentFlagUseCase:
    """Toggle the hidden (soft delete) or scheduled flag of one assignment."""

    def __init__(self, assignment_repo: AssignmentRepository):
        self._assignments = assignment_repo

    async def set_hidden(self, assignment_id: UUID, hidden: bool) -> None:
        if not await self._assignments.update_flags(assignment_id, hidden=hidden):
            raise NotFoundError(f"Assignment {assignment_id} not found")
        logger.info("Assignment %s hidden=%s", assignment_id, hidden)

    async def set_scheduled(self, assignment_id: UUID, scheduled: bool) -> None:
        if not await self._assignments.update_flags(assignment_id, scheduled=scheduled):
            raise NotFoundError(f"Assignment {assignment_id} not found")
        logger.info("Assignment %s scheduled=%s", assignment_id, scheduled)
