"""
Persistence Errors

Normalized exceptions raised by the repository layer. Driver and engine
exceptions never cross the repository boundary: they are chained as the
``__cause__`` of one of these instead.
"""

from enum import Enum
from uuid import UUID


class ErrorKind(str, Enum):
    """Kinds of failure a repository operation can report."""

    PERSISTENCE_FAILURE = "persistence_failure"
    NOT_FOUND = "not_found"


class RepositoryError(Exception):
    """Base exception for repository errors."""

    kind: ErrorKind = ErrorKind.PERSISTENCE_FAILURE

    def __init__(self, message: str, error_code: str, status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class PersistenceError(RepositoryError):
    """Raised when the storage engine fails to complete an operation."""

    kind = ErrorKind.PERSISTENCE_FAILURE

    def __init__(
        self,
        message: str = "Database operation failed",
        error_code: str = "SQL_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message=message, error_code=error_code, status_code=status_code)


class UserNotFoundError(PersistenceError):
    """
    Raised when no user matches a lookup or update key.

    Subclasses PersistenceError so callers that only handle the generic
    failure keep treating a missing row as one.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, field: str | None = None, value: str | UUID | None = None):
        message = f"User with {field} {value!r} not found" if field else "User not found"
        super().__init__(
            message=message,
            error_code="USER_NOT_FOUND",
            status_code=404,
        )
        self.field = field
        self.value = value
