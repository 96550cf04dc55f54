"""Attribute filtering for issue listings.

Each filterable field maps to an accessor and a comparison that knows the
field's type. Query values always arrive as strings.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from app.domain.entities import Issue

logger = logging.getLogger(__name__)


def _parse_timestamp(raw: str) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _match_text(actual: str, expected: str) -> bool:
    return actual == expected


def _match_flag(actual: bool, expected: str) -> bool:
    lowered = expected.strip().lower()
    if lowered not in ("true", "false"):
        return False
    return actual == (lowered == "true")


def _match_timestamp(actual: datetime, expected: str) -> bool:
    parsed = _parse_timestamp(expected)
    return parsed is not None and parsed == actual


_Matcher = tuple[Callable[[Issue], Any], Callable[[Any, str], bool]]

FILTERABLE_FIELDS: dict[str, _Matcher] = {
    "_id": (lambda issue: issue.id, _match_text),
    "issue_title": (lambda issue: issue.issue_title, _match_text),
    "issue_text": (lambda issue: issue.issue_text, _match_text),
    "created_by": (lambda issue: issue.created_by, _match_text),
    "assigned_to": (lambda issue: issue.assigned_to, _match_text),
    "status_text": (lambda issue: issue.status_text, _match_text),
    "open": (lambda issue: issue.open, _match_flag),
    "created_on": (lambda issue: issue.created_on, _match_timestamp),
    "updated_on": (lambda issue: issue.updated_on, _match_timestamp),
}


def matches(issue: Issue, filters: Mapping[str, str]) -> bool:
    """True if the issue satisfies every filter. Unknown keys never match."""
    for key, expected in filters.items():
        matcher = FILTERABLE_FIELDS.get(key)
        if matcher is None:
            return False
        accessor, compare = matcher
        if not compare(accessor(issue), expected):
            return False
    return True


def filter_issues(issues: Iterable[Issue], filters: Mapping[str, str]) -> list[Issue]:
    """Keep the issues matching all filters, preserving their order."""
    unknown = sorted(set(filters) - set(FILTERABLE_FIELDS))
    if unknown:
        logger.debug("Unknown filter key(s) %s, no issue can match", unknown)
        return []
    return [issue for issue in issues if matches(issue, filters)]
