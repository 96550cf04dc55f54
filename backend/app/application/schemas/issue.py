"""Pydantic DTOs (Data Transfer Objects) for the Issue feature.

Request bodies arrive either as JSON objects or as form fields. Before
validation every body is normalized: values are turned into strings, and
``null``, ``false`` and zero become empty strings, so they fail the
required-field and ``_id`` checks while still counting as sent in an
update. ``open`` keeps booleans and ``null``.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from app.domain.entities.issue import UPDATABLE_FIELDS


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_falsy_scalar(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return not value or value != value  # zero or NaN
    return False


def normalize_body(data: Any) -> dict[str, Any]:
    """Coerce every value to a string; falsy scalars become ``""``."""
    if not isinstance(data, dict):
        return {}
    normalized: dict[str, Any] = {}
    for key, value in data.items():
        if key == "open" and (value is None or isinstance(value, bool)):
            normalized[key] = value
        elif _is_falsy_scalar(value):
            normalized[key] = ""
        else:
            normalized[key] = _stringify(value)
    return normalized


class _IssueRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_fields(cls, data: Any) -> dict[str, Any]:
        return normalize_body(data)


class IssueCreate(_IssueRequest):
    """Schema for creating a new issue.

    Required fields default to empty strings so that a missing field is
    reported by the service rather than by request validation.
    """

    issue_title: str = Field("", examples=["Title"])
    issue_text: str = Field("", examples=["text"])
    created_by: str = Field("", examples=["Functional Test"])
    assigned_to: str = Field("", examples=["Chai and Mocha"])
    status_text: str = Field("", examples=["In QA"])

    def has_required_fields(self) -> bool:
        return bool(self.issue_title and self.issue_text and self.created_by)


class IssueUpdate(_IssueRequest):
    """Schema for a partial update: only the fields sent are applied."""

    id: str | None = Field(None, alias="_id")
    issue_title: str | None = None
    issue_text: str | None = None
    created_by: str | None = None
    assigned_to: str | None = None
    status_text: str | None = None
    open: bool | None = None

    @field_validator("open", mode="before")
    @classmethod
    def normalize_open(cls, value: Any) -> bool:
        return not (value is False or value == "false")

    def changes(self) -> dict[str, Any]:
        """The updatable fields present in the request body."""
        return self.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)


class IssueDelete(_IssueRequest):
    """Schema for deleting an issue."""

    id: str | None = Field(None, alias="_id")


class IssueResponse(BaseModel):
    """Schema returned to the client."""

    id: str = Field(
        validation_alias=AliasChoices("id", "_id"), serialization_alias="_id"
    )
    issue_title: str
    issue_text: str
    created_by: str
    assigned_to: str
    status_text: str
    created_on: datetime
    updated_on: datetime
    open: bool

    model_config = {"from_attributes": True}
