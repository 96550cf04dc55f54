from .issue import Issue, UPDATABLE_FIELDS

__all__ = [
    "Issue",
    "UPDATABLE_FIELDS",
]
