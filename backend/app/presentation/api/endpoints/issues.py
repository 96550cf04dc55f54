"""Issue endpoints to list, create, update and delete issues of a project.

Rejected requests are still answered with 200; the error travels in the
JSON body.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.application.schemas import IssueCreate, IssueDelete, IssueResponse, IssueUpdate
from app.application.services import IssueService
from app.domain.exceptions import IssueTrackerError
from app.infrastructure.dependencies import (
    get_body_fields,
    get_issue_service,
    get_query_filters,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issues", tags=["Issues"])


def _rejected(action: str, project: str, error: IssueTrackerError) -> dict[str, str]:
    logger.info(
        "Rejected %s in project '%s': %s (_id=%s)",
        action, project, error.message, error.issue_id,
    )
    return error.to_payload()


@router.get("/{project}", response_model=list[IssueResponse])
async def list_issues(
    project: str,
    filters: dict[str, str] = Depends(get_query_filters),
    service: IssueService = Depends(get_issue_service),
) -> list[IssueResponse]:
    """List the issues of a project, narrowed by any query parameters."""
    issues = await service.list_issues(project, filters)
    return [IssueResponse.model_validate(i, from_attributes=True) for i in issues]


@router.post("/{project}", response_model=None)
async def create_issue(
    project: str,
    fields: dict[str, Any] = Depends(get_body_fields),
    service: IssueService = Depends(get_issue_service),
) -> IssueResponse | dict[str, str]:
    """Create an issue in a project."""
    try:
        issue = await service.create_issue(project, IssueCreate.model_validate(fields))
    except IssueTrackerError as e:
        return _rejected("create", project, e)
    return IssueResponse.model_validate(issue, from_attributes=True)


@router.put("/{project}", response_model=None)
async def update_issue(
    project: str,
    fields: dict[str, Any] = Depends(get_body_fields),
    service: IssueService = Depends(get_issue_service),
) -> dict[str, str]:
    """Update the fields sent for one issue of a project."""
    data = IssueUpdate.model_validate(fields)
    try:
        issue = await service.update_issue(project, data)
    except IssueTrackerError as e:
        return _rejected("update", project, e)
    return {"result": "successfully updated", "_id": issue.id}


@router.delete("/{project}", response_model=None)
async def delete_issue(
    project: str,
    fields: dict[str, Any] = Depends(get_body_fields),
    service: IssueService = Depends(get_issue_service),
) -> dict[str, str]:
    """Delete one issue of a project."""
    try:
        issue_id = await service.delete_issue(project, IssueDelete.model_validate(fields))
    except IssueTrackerError as e:
        return _rejected("delete", project, e)
    return {"result": "successfully deleted", "_id": issue_id}
