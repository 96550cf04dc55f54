"""FastAPI dependency injection: wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Depends, Request

from app.application.interfaces import IssueRepository
from app.application.services import IssueService

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_issue_repository(request: Request) -> IssueRepository:
    """The issue store owned by the running application (see ``create_app``)."""
    return request.app.state.issue_repository


async def get_issue_service(
    repository: IssueRepository = Depends(get_issue_repository),
) -> AsyncGenerator[IssueService, None]:
    """Provides an IssueService bound to the application's issue store."""
    yield IssueService(repository)


async def get_body_fields(request: Request) -> dict[str, Any]:
    """Read the request body as a flat field mapping.

    Form bodies and JSON objects are accepted. Anything else, including
    malformed JSON, is treated as an empty body.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items()}

    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Ignoring malformed JSON body on %s %s", request.method, request.url.path)
        return {}
    if not isinstance(payload, dict):
        logger.warning("Ignoring non-object JSON body on %s %s", request.method, request.url.path)
        return {}
    return payload


def get_query_filters(request: Request) -> dict[str, str]:
    """Query parameters as filter criteria; a repeated key keeps its last value."""
    return {key: value for key, value in request.query_params.multi_items()}
