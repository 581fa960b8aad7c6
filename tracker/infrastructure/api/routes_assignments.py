"""Assignment endpoints — listing, lookup, creation and flag updates."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from tracker.adapters.persistence.repositories import SqlAssignmentRepository
from tracker.application.use_cases.manage_assignments import (
    CreateAssignmentsUseCase,
    SetAssignmentFlagUseCase,
)
from tracker.config import settings
from tracker.domain.errors import NotFoundError
from tracker.infrastructure.api.dependencies import (
    get_assignment_repo,
    get_create_assignments_uc,
    get_set_flag_uc,
)
from tracker.infrastructure.api.schemas import (
    decode_assignment_batch,
    decode_single_assignment,
    parse_bool,
    parse_uuid,
    read_json,
    serialize_assignment,
)

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("")
@router.get("/", include_in_schema=False)
async def list_recent(repo: SqlAssignmentRepository = Depends(get_assignment_repo)):
    """Newest visible assignments, capped at the recent limit."""
    assignments = await repo.find(hidden=False, limit=settings.recent_limit)
    return [serialize_assignment(a) for a in assignments]


@router.get("/all")
async def list_all(repo: SqlAssignmentRepository = Depends(get_assignment_repo)):
    """Every visible assignment, newest first."""
    assignments = await repo.find(hidden=False)
    return [serialize_assignment(a) for a in assignments]


@router.get("/hidden")
async def list_hidden(repo: SqlAssignmentRepository = Depends(get_assignment_repo)):
    """Every hidden assignment, newest first."""
    assignments = await repo.find(hidden=True)
    return [serialize_assignment(a) for a in assignments]


@router.get("/scheduled/{scheduled}")
async def list_by_scheduled(
    scheduled: str, repo: SqlAssignmentRepository = Depends(get_assignment_repo)
):
    """Newest visible assignments with the given scheduled flag."""
    flag = parse_bool(scheduled, "scheduled")
    assignments = await repo.find(hidden=False, scheduled=flag, limit=settings.recent_limit)
    return [serialize_assignment(a) for a in assignments]


@router.get("/{assignment_id}")
async def get_assignment(
    assignment_id: str, repo: SqlAssignmentRepository = Depends(get_assignment_repo)
):
    """Get a single assignment."""
    uuid = parse_uuid(assignment_id)
    assignment = await repo.get_by_id(uuid)
    if assignment is None:
        raise NotFoundError(f"Assignment {uuid} not found")
    return serialize_assignment(assignment)


@router.post("")
@router.post("/", include_in_schema=False)
async def create_assignment(
    request: Request, uc: CreateAssignmentsUseCase = Depends(get_create_assignments_uc)
):
    """Create one assignment from an object, or from a one-element array."""
    assignment = decode_single_assignment(await read_json(request))
    saved = await uc.create_one(assignment)
    return serialize_assignment(saved)


@router.post("/batch")
@router.post("/batch/", include_in_schema=False)
async def create_batch(
    request: Request, uc: CreateAssignmentsUseCase = Depends(get_create_assignments_uc)
):
    """Create many assignments at once."""
    assignments = decode_assignment_batch(await read_json(request))
    saved = await uc.create_many(assignments)
    return [serialize_assignment(a) for a in saved]


@router.post("/{assignment_id}/hide/{hidden}")
async def hide_assignment(
    assignment_id: str, hidden: str, uc: SetAssignmentFlagUseCase = Depends(get_set_flag_uc)
):
    """Set the hidden flag (soft delete)."""
    uuid = parse_uuid(assignment_id)
    flag = parse_bool(hidden, "hidden")
    await uc.set_hidden(uuid, flag)
    return {"status": "ok"}


@router.post("/{assignment_id}/schedule/{scheduled}")
async def schedule_assignment(
    assignment_id: str, scheduled: str, uc: SetAssignmentFlagUseCase = Depends(get_set_flag_uc)
):
    """Set the scheduled flag."""
    uuid = parse_uuid(assignment_id)
    flag = parse_bool(scheduled, "scheduled")
    await uc.set_scheduled(uuid, flag)
    return {"status": "ok"}
