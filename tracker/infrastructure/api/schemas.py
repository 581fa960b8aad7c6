"""Request payload schemas and the decoding steps the endpoints share."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from tracker.domain.entities.assignment import Assignment
from tracker.domain.entities.calendar_event import CalendarEvent
from tracker.domain.errors import DateParseError, ValidationError
from tracker.infrastructure.api.dates import parse_timestamp

logger = logging.getLogger(__name__)

# ── Request schemas ─────────────────────────────────────────────────


class AssignmentIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID | None = None
    agent: StrictStr
    address: StrictStr
    submitted_on: datetime = Field(alias="submittedOn")
    scheduled: StrictBool = False
    hidden: StrictBool = False

    @field_validator("submitted_on", mode="before")
    @classmethod
    def _parse_submitted_on(cls, value: Any) -> datetime:
        if not isinstance(value, str):
            raise ValueError("submittedOn must be a date string")
        try:
            return parse_timestamp(value)
        except DateParseError as e:
            raise ValueError(str(e)) from e

    def to_entity(self) -> Assignment:
        return Assignment(
            id=self.id,
            agent=self.agent,
            address=self.address,
            submitted_on=self.submitted_on,
            scheduled=self.scheduled,
            hidden=self.hidden,
        )


class CalendarEventIn(BaseModel):
    # Possible statuses: "confirmed", "tentative", "cancelled"
    status: StrictStr
    address: StrictStr

    def to_entity(self) -> CalendarEvent:
        return CalendarEvent(status=self.status, address=self.address)


_assignment_list = TypeAdapter(list[AssignmentIn])


# ── Decoding ────────────────────────────────────────────────────────


async def read_json(request: Request, error: str = "Request body is not valid JSON") -> Any:
    """Return the parsed JSON body, or raise ValidationError."""
    body = await request.body()
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(error) from e


def decode_single_assignment(payload: Any) -> Assignment:
    """Decode one assignment from an object, or else from the first array element."""
    if isinstance(payload, dict):
        candidate = payload
    elif isinstance(payload, list) and payload:
        candidate = payload[0]
    else:
        raise ValidationError("Expected an assignment object or a non-empty array of assignments")

    try:
        return AssignmentIn.model_validate(candidate).to_entity()
    except PydanticValidationError as e:
        logger.debug("Rejected assignment payload: %s", e)
        raise ValidationError("Did not receive a valid Assignment") from e


def decode_assignment_batch(payload: Any) -> list[Assignment]:
    try:
        items = _assignment_list.validate_python(payload)
    except PydanticValidationError as e:
        logger.debug("Rejected assignment batch: %s", e)
        raise ValidationError("Did not receive a valid array of Assignments") from e
    return [item.to_entity() for item in items]


def decode_calendar_event(payload: Any) -> CalendarEvent:
    try:
        return CalendarEventIn.model_validate(payload).to_entity()
    except PydanticValidationError as e:
        logger.debug("Rejected calendar event: %s", e)
        raise ValidationError("event payload invalid") from e


# ── Path parameters ─────────────────────────────────────────────────


def parse_uuid(raw: str, name: str = "id") -> UUID:
    try:
        return UUID(raw)
    except ValueError as e:
        raise ValidationError(f"No valid '{name}' parameter sent with request.") from e


def parse_bool(raw: str, name: str) -> bool:
    """Accept exactly "true" or "false"."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValidationError(f"No valid '{name}' parameter sent with request.")


# ── Serialization ───────────────────────────────────────────────────


def serialize_assignment(a: Assignment) -> dict:
    """Convert an Assignment to an API response dict."""
    return {
        "id": str(a.id) if a.id else None,
        "agent": a.agent,
        "address": a.address,
        "submittedOn": a.submitted_on.isoformat(),
        "scheduled": a.scheduled,
        "hidden": a.hidden,
    }
