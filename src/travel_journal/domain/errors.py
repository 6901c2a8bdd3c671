"""Error kinds raised by the travel journal services."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure categories surfaced to callers."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    SERVER = "server"


class JournalError(Exception):
    """Base class for service failures with a human-readable message."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(JournalError):
    kind = ErrorKind.VALIDATION


class ConflictError(JournalError):
    kind = ErrorKind.CONFLICT


class NotFoundError(JournalError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(JournalError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(JournalError):
    kind = ErrorKind.FORBIDDEN


class ServerError(JournalError):
    kind = ErrorKind.SERVER
