"""Domain error taxonomy.

Every fault reaching a use case boundary is one of these kinds. Storage
adapters translate driver exceptions into them so callers never handle
database-specific errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to callers."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    UNAVAILABLE = "unavailable"
    VALIDATION = "validation"
    TRANSIENT = "transient"


class ClubError(Exception):
    """Base class for expected club manager failures."""

    kind: ErrorKind = ErrorKind.TRANSIENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ClubError):
    """Entity absent."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(ClubError):
    """Duplicate record (e.g. a second confirmation)."""

    kind = ErrorKind.ALREADY_EXISTS


class UnavailableError(ClubError):
    """Entity exists but is not open for the requested action."""

    kind = ErrorKind.UNAVAILABLE


class ValidationError(ClubError):
    """Missing or malformed input."""

    kind = ErrorKind.VALIDATION


class TransientError(ClubError):
    """Backend fault; safe to retry by resubmitting."""

    kind = ErrorKind.TRANSIENT


__all__ = [
    "ErrorKind",
    "ClubError",
    "NotFoundError",
    "AlreadyExistsError",
    "UnavailableError",
    "ValidationError",
    "TransientError",
]
