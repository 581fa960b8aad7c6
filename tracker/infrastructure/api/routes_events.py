"""Calendar event endpoint — reconcile an external event with an assignment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from tracker.application.use_cases.reconcile_event import ReconcileEventUseCase
from tracker.infrastructure.api.dependencies import get_reconcile_event_uc
from tracker.infrastructure.api.schemas import (
    decode_calendar_event,
    read_json,
    serialize_assignment,
)

router = APIRouter(prefix="/events", tags=["events"])


@router.post("")
@router.post("/", include_in_schema=False)
async def reconcile_event(
    request: Request, uc: ReconcileEventUseCase = Depends(get_reconcile_event_uc)
):
    """Match the event address to an assignment and update its scheduled flag."""
    payload = await read_json(request, error="event payload invalid")
    event = decode_calendar_event(payload)
    assignment = await uc.execute(event)
    return serialize_assignment(assignment)
