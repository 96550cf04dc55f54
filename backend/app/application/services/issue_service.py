"""Application service (use case) for Issue operations."""

import logging
from collections.abc import Mapping

from app.application.interfaces import IssueRepository
from app.application.schemas.issue import IssueCreate, IssueDelete, IssueUpdate
from app.application.services.issue_filter import filter_issues
from app.domain.entities import Issue
from app.domain.exceptions import (
    IssueDeleteError,
    IssueUpdateError,
    MissingIdError,
    NoUpdateFieldsError,
    RequiredFieldsMissingError,
)

logger = logging.getLogger(__name__)


class IssueService:
    """Orchestrates issue list/create/update/delete. Depends on the repository port (DI)."""

    def __init__(self, repository: IssueRepository):
        self._repository = repository

    async def list_issues(
        self, project: str, filters: Mapping[str, str] | None = None
    ) -> list[Issue]:
        issues = await self._repository.get_all(project)
        if not filters:
            return issues
        return filter_issues(issues, filters)

    async def create_issue(self, project: str, data: IssueCreate) -> Issue:
        if not data.has_required_fields():
            raise RequiredFieldsMissingError()
        issue = Issue(
            issue_title=data.issue_title,
            issue_text=data.issue_text,
            created_by=data.created_by,
            assigned_to=data.assigned_to,
            status_text=data.status_text,
        )
        created = await self._repository.create(project, issue)
        logger.info("Created issue %s in project '%s'", created.id, project)
        return created

    async def update_issue(self, project: str, data: IssueUpdate) -> Issue:
        """Apply a partial update.

        The checks run in a fixed order: missing ``_id``, then an empty
        change set, and only then the lookup.
        """
        if not data.id:
            raise MissingIdError()
        changes = data.changes()
        if not changes:
            raise NoUpdateFieldsError(data.id)

        updated = await self._repository.update(project, data.id, changes)
        if updated is None:
            raise IssueUpdateError(data.id)
        logger.info(
            "Updated issue %s in project '%s' (%s)",
            data.id, project, ", ".join(sorted(changes)),
        )
        return updated

    async def delete_issue(self, project: str, data: IssueDelete) -> str:
        if not data.id:
            raise MissingIdError()
        if not await self._repository.delete(project, data.id):
            raise IssueDeleteError(data.id)
        logger.info("Deleted issue %s from project '%s'", data.id, project)
        return data.id
