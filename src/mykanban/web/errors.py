"""Error kinds raised by the board and task services.

The HTTP layer maps each kind to a status code; services never deal with
status codes themselves.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


class KanbanError(Exception):
    """Base class for all classified service errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class ValidationError(KanbanError):
    """Malformed or incomplete input, detected before touching storage."""

    kind = ErrorKind.VALIDATION


class NotFound(KanbanError):
    """Missing resource, or a task that belongs to someone else."""

    kind = ErrorKind.NOT_FOUND


class Forbidden(KanbanError):
    """The resource exists but lives on another user's board."""

    kind = ErrorKind.FORBIDDEN


class Conflict(KanbanError):
    kind = ErrorKind.CONFLICT


class Unauthorized(KanbanError):
    kind = ErrorKind.UNAUTHORIZED
