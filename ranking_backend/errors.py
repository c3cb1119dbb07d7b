"""Error types raised by the service layer.

Each error carries a ``kind`` tag and the HTTP status the API maps it to, so
routers and exception handlers branch on the type rather than on driver
specific error codes.
"""

from __future__ import annotations


class RankingError(Exception):
    """Base class for failures surfaced to API clients."""

    kind = "error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.message}


class ValidationError(RankingError):
    """A required field is missing or malformed."""

    kind = "validation"
    status_code = 400


class DuplicateError(RankingError):
    """A unique constraint would be violated."""

    kind = "duplicate"
    status_code = 409


class NotFoundError(RankingError):
    """The referenced record does not exist."""

    kind = "not_found"
    status_code = 404


class StorageError(RankingError):
    """The store was unreachable or rejected the operation."""

    kind = "storage"
    status_code = 500


__all__ = [
    "DuplicateError",
    "NotFoundError",
    "RankingError",
    "StorageError",
    "ValidationError",
]
