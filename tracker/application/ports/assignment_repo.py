"""Port interface for assignment persistence."""

from abc import ABC, abstractmethod
from uuid import UUID

from tracker.domain.entities.assignment import Assignment


class AssignmentRepository(ABC):
    @abstractmethod
    async def save(self, assignment: Assignment) -> Assignment:
        ...

    @abstractmethod
    async def save_many(self, assignments: list[Assignment]) -> list[Assignment]:
        ...

    @abstractmethod
    async def get_by_id(self, assignment_id: UUID) -> Assignment | None:
        ...

    @abstractmethod
    async def find(
        self,
        hidden: bool | None = None,
        scheduled: bool | None = None,
        limit: int | None = None,
    ) -> list[Assignment]:
        """Return matching assignments, newest submission first."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Assignment]:
        """Return every assignment, hidden included, oldest submission first."""
        ...

    @abstractmethod
    async def update_flags(
        self,
        assignment_id: UUID,
        scheduled: bool | None = None,
        hidden: bool | None = None,
    ) -> bool:
        """Write only the given flags. Returns False if the id is unknown."""
        ...
