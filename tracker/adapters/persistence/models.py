"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from tracker.adapters.persistence.database import Base


class AssignmentModel(Base):
    __tablename__ = "assignments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    agent: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    submitted_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    scheduled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    hidden: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    __table_args__ = (
        Index("idx_assignments_submitted_on", "submitted_on"),
        Index("idx_assignments_hidden", "hidden"),
        Index("idx_assignments_scheduled", "scheduled"),
    )
