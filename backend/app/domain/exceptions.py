"""Domain-specific exceptions: framework-independent.

Every error knows the JSON body it is reported with. The API answers
rejected requests with a normal 200 response carrying that body.
"""


class IssueTrackerError(Exception):
    """Base class for rejected issue requests."""

    message: str = "request rejected"

    def __init__(self, issue_id: str | None = None):
        self.issue_id = issue_id
        super().__init__(self.message)

    def to_payload(self) -> dict[str, str]:
        payload = {"error": self.message}
        if self.issue_id is not None:
            payload["_id"] = self.issue_id
        return payload


class RequiredFieldsMissingError(IssueTrackerError):
    """Raised when issue_title, issue_text or created_by is missing or empty."""

    message = "required field(s) missing"


class MissingIdError(IssueTrackerError):
    """Raised when an update or delete request carries no ``_id``."""

    message = "missing _id"


class NoUpdateFieldsError(IssueTrackerError):
    """Raised when an update request names an issue but changes nothing."""

    message = "no update field(s) sent"


class IssueUpdateError(IssueTrackerError):
    """Raised when the issue to update does not exist in the project."""

    message = "could not update"


class IssueDeleteError(IssueTrackerError):
    """Raised when the issue to delete does not exist in the project."""

    message = "could not delete"
