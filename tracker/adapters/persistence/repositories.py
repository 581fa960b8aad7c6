"""SQLAlchemy repository implementations."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.adapters.persistence.models import AssignmentModel
from tracker.application.ports.assignment_repo import AssignmentRepository
from tracker.domain.entities.assignment import Assignment
from tracker.domain.errors import StoreError, ValidationError

# ─── Mappers ─────────────────────────────────────────────────────────


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _assignment_to_domain(m: AssignmentModel) -> Assignment:
    return Assignment(
        id=m.id,
        agent=m.agent,
        address=m.address,
        submitted_on=_as_utc(m.submitted_on),
        scheduled=m.scheduled,
        hidden=m.hidden,
    )


def _assignment_to_model(a: Assignment) -> AssignmentModel:
    m = AssignmentModel(
        agent=a.agent,
        address=a.address,
        submitted_on=_as_utc(a.submitted_on),
        scheduled=a.scheduled,
        hidden=a.hidden,
    )
    if a.id is not None:
        m.id = a.id
    return m


# ─── Repositories ────────────────────────────────────────────────────


class SqlAssignmentRepository(AssignmentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, assignment: Assignment) -> Assignment:
        saved = await self.save_many([assignment])
        return saved[0]

    async def save_many(self, assignments: list[Assignment]) -> list[Assignment]:
        models = [_assignment_to_model(a) for a in assignments]
        self._s.add_all(models)
        try:
            await self._s.flush()
        except IntegrityError as e:
            raise ValidationError("Assignment id already exists") from e
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to save assignments: {e}") from e

        for assignment, m in zip(assignments, models):
            assignment.id = m.id
            assignment.submitted_on = _as_utc(m.submitted_on)
        return assignments

    async def get_by_id(self, assignment_id: UUID) -> Assignment | None:
        try:
            m = await self._s.get(AssignmentModel, assignment_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load assignment {assignment_id}: {e}") from e
        return _assignment_to_domain(m) if m else None

    async def find(
        self,
        hidden: bool | None = None,
        scheduled: bool | None = None,
        limit: int | None = None,
    ) -> list[Assignment]:
        stmt = select(AssignmentModel)
        if hidden is not None:
            stmt = stmt.where(AssignmentModel.hidden == hidden)
        if scheduled is not None:
            stmt = stmt.where(AssignmentModel.scheduled == scheduled)
        stmt = stmt.order_by(AssignmentModel.submitted_on.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            result = await self._s.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to query assignments: {e}") from e
        return [_assignment_to_domain(m) for m in result.scalars()]

    async def get_all(self) -> list[Assignment]:
        try:
            result = await self._s.execute(
                select(AssignmentModel).order_by(
                    AssignmentModel.submitted_on, AssignmentModel.id
                )
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load assignments: {e}") from e
        return [_assignment_to_domain(m) for m in result.scalars()]

    async def update_flags(
        self,
        assignment_id: UUID,
        scheduled: bool | None = None,
        hidden: bool | None = None,
    ) -> bool:
        values = {}
        if scheduled is not None:
            values["scheduled"] = scheduled
        if hidden is not None:
            values["hidden"] = hidden

        try:
            if not values:
                return await self._s.get(AssignmentModel, assignment_id) is not None
            result = await self._s.execute(
                update(AssignmentModel)
                .where(AssignmentModel.id == assignment_id)
                .values(**values)
            )
            await self._s.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to update assignment {assignment_id}: {e}") from e
        return result.rowcount > 0
