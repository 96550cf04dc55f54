from .issue import IssueCreate, IssueDelete, IssueResponse, IssueUpdate

__all__ = [
    "IssueCreate",
    "IssueDelete",
    "IssueResponse",
    "IssueUpdate",
]
