"""Assignment entity — a property visit handed to an agent."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Assignment:
    id: UUID | None
    agent: str
    address: str
    submitted_on: datetime
    scheduled: bool = False
    hidden: bool = False

    def is_persisted(self) -> bool:
        return self.id is not None
