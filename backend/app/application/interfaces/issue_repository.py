"""Abstract repository interface (port) for Issue storage."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Issue


class IssueRepository(ABC):
    """Port for issue storage, partitioned by project name."""

    @abstractmethod
    async def get_all(self, project: str) -> list[Issue]:
        """Retrieve every issue of a project in insertion order.

        An unknown project yields an empty list.
        """
        ...

    @abstractmethod
    async def create(self, project: str, issue: Issue) -> Issue:
        """Append a new issue to the project, creating the project if needed."""
        ...

    @abstractmethod
    async def update(
        self, project: str, issue_id: str, changes: dict[str, Any]
    ) -> Issue | None:
        """Find an issue and merge the changes into it in one step.

        Returns the updated issue, or None if the project has no such issue.
        """
        ...

    @abstractmethod
    async def delete(self, project: str, issue_id: str) -> bool:
        """Delete an issue. Returns True if deleted, False if not found."""
        ...
