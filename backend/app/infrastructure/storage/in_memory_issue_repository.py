"""Process-local IssueRepository where issues live for the lifetime of the process."""

import asyncio
from dataclasses import replace
from typing import Any

from app.application.interfaces import IssueRepository
from app.domain.entities import Issue


class InMemoryIssueRepository(IssueRepository):
    """Implements the IssueRepository port with an ordered list per project.

    All access goes through one lock so that reads and mutations never
    interleave. Issues handed out are copies; changes only land through
    ``update``, which finds and merges while holding the lock.
    """

    def __init__(self) -> None:
        self._projects: dict[str, list[Issue]] = {}
        self._lock = asyncio.Lock()

    async def get_all(self, project: str) -> list[Issue]:
        async with self._lock:
            return [replace(issue) for issue in self._projects.get(project, [])]

    async def create(self, project: str, issue: Issue) -> Issue:
        async with self._lock:
            self._projects.setdefault(project, []).append(replace(issue))
        return issue

    async def update(
        self, project: str, issue_id: str, changes: dict[str, Any]
    ) -> Issue | None:
        async with self._lock:
            index = self._index_of(project, issue_id)
            if index is None:
                return None
            issue = replace(self._projects[project][index])
            issue.update(**changes)
            self._projects[project][index] = issue
            return replace(issue)

    async def delete(self, project: str, issue_id: str) -> bool:
        async with self._lock:
            index = self._index_of(project, issue_id)
            if index is None:
                return False
            del self._projects[project][index]
        return True

    def _index_of(self, project: str, issue_id: str) -> int | None:
        """Position of the issue in its project list. Caller holds the lock."""
        for index, issue in enumerate(self._projects.get(project, [])):
            if issue.id == issue_id:
                return index
        return None
