"""
Application exceptions for the user store.
Raised inside a transaction scope and converted to Err results at the
repository boundary, so none of them reach callers.
"""

from typing import Any, Dict, Optional

from userstore.core.result import Err, ErrorKind


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.STORAGE_FAILURE,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.kind = kind
        self.details = details or {}
        super().__init__(self.message)

    def to_err(self) -> Err:
        return Err(self.kind, self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorKind.NOT_FOUND, details)


class DuplicateEntryException(AppError):
    """A unique field (email, phone number) is already taken."""
    def __init__(self, message: str, kind: ErrorKind, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, kind, details)


class ValidationException(AppError):
    """Malformed or missing input field."""
    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.INVALID_FORMAT,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, kind, details)
