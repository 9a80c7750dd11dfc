"""
Custom exceptions for the userstream domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (transport, serialization library, etc.).
"""

from typing import Any, Optional


class UserStreamException(Exception):
    """Base exception for all userstream errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MalformedRecordException(UserStreamException):
    """Raised when a backend record does not match the user record shape."""

    def __init__(self, field: str, reason: str, record: Any = None):
        self.field = field
        self.reason = reason
        message = f"Malformed record, field '{field}': {reason}"
        super().__init__(
            message=message,
            details={"field": field, "reason": reason, "record": repr(record)},
        )


class FetchFailedException(UserStreamException):
    """Raised when fetching or decoding data from the backend fails."""

    def __init__(self, resource: str, cause: BaseException):
        self.resource = resource
        self.cause = cause
        message = f"Failed to fetch {resource}: {cause}"
        super().__init__(
            message=message,
            details={"resource": resource, "cause": type(cause).__name__},
        )


class UserNotFoundException(UserStreamException):
    """Raised when no user with the requested id exists."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(
            message=f"User not found: {user_id}", details={"user_id": user_id}
        )


class ChannelClosedException(UserStreamException):
    """Raised when an operation is attempted on a disposed update channel."""

    def __init__(self, operation: str):
        self.operation = operation
        message = f"Cannot {operation}: channel is closed"
        super().__init__(message=message, details={"operation": operation})
