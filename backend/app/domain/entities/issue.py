"""Domain entity, a pure Python business object for a tracked issue."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

# Fields a client may overwrite through a partial update.
UPDATABLE_FIELDS: tuple[str, ...] = (
    "issue_title",
    "issue_text",
    "created_by",
    "assigned_to",
    "status_text",
    "open",
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Issue:
    """A tracked issue belonging to exactly one project.

    The identifier and ``created_on`` never change after creation;
    ``updated_on`` starts equal to ``created_on`` and only moves forward.
    """

    issue_title: str
    issue_text: str
    created_by: str
    assigned_to: str = ""
    status_text: str = ""
    open: bool = True
    id: str = field(default_factory=lambda: uuid4().hex)
    created_on: datetime = field(default_factory=_utcnow)
    updated_on: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_on is None:
            self.updated_on = self.created_on

    def update(self, **changes: Any) -> None:
        """Merge the given fields into the issue and refresh ``updated_on``.

        Fields that are not passed keep their current value.
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not updatable: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_on = max(_utcnow(), self.updated_on)
