"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.adapters.persistence.database import get_session
from tracker.adapters.persistence.models import AssignmentModel

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report whether the assignments table can be read, and how many rows it holds."""
    body = {"service": "Assignment Tracker", "status": "ok"}
    try:
        total = await session.scalar(select(func.count()).select_from(AssignmentModel))
    except SQLAlchemyError as e:
        body.update(status="degraded", database=f"error: {e}", assignments=None)
        return body

    body.update(database="connected", assignments=total)
    return body
