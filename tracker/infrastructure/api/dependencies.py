"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.adapters.matching.rapidfuzz_scorer import RapidFuzzScorer
from tracker.adapters.persistence.database import get_session
from tracker.adapters.persistence.repositories import SqlAssignmentRepository
from tracker.application.use_cases.manage_assignments import (
    CreateAssignmentsUseCase,
    SetAssignmentFlagUseCase,
)
from tracker.application.use_cases.reconcile_event import ReconcileEventUseCase
from tracker.config import settings

# Stateless singleton, shared across requests
address_scorer = RapidFuzzScorer(method=settings.match_scorer)


def get_assignment_repo(session: AsyncSession = Depends(get_session)) -> SqlAssignmentRepository:
    return SqlAssignmentRepository(session)


def get_create_assignments_uc(
    repo: SqlAssignmentRepository = Depends(get_assignment_repo),
) -> CreateAssignmentsUseCase:
    return CreateAssignmentsUseCase(assignment_repo=repo)


def get_set_flag_uc(
    repo: SqlAssignmentRepository = Depends(get_assignment_repo),
) -> SetAssignmentFlagUseCase:
    return SetAssignmentFlagUseCase(assignment_repo=repo)


def get_reconcile_event_uc(
    repo: SqlAssignmentRepository = Depends(get_assignment_repo),
) -> ReconcileEventUseCase:
    return ReconcileEventUseCase(
        assignment_repo=repo,
        scorer=address_scorer,
        score_floor=settings.match_score_floor,
    )
