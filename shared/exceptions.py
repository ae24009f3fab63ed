"""
Base exception classes for the RecycleMe backend.

Each module should define its own exceptions that inherit from these bases.
Route handlers map the bases to HTTP status codes:

- ValidationError     -> 400
- AuthenticationError -> 401
- AuthorizationError  -> 403
- NotFoundError       -> 404
- ConflictError       -> 409
- StorageError        -> 500
"""

from typing import Optional, Any


class RecycleMeError(Exception):
    """
    Base exception for all RecycleMe errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(RecycleMeError):
    """Resource not found."""

    pass


class ValidationError(RecycleMeError):
    """Input validation or business rule failed."""

    pass


class ConflictError(RecycleMeError):
    """Resource already exists (unique key taken)."""

    pass


class AuthenticationError(RecycleMeError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(RecycleMeError):
    """Authorization failed (wrong account type or unverified account)."""

    pass


class StorageError(RecycleMeError):
    """
    Unexpected failure talking to the database.

    The message is for logs only; clients get a generic 500.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "STORAGE_ERROR", details)
        self.operation = operation
        self.details["operation"] = operation
