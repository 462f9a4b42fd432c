"""
Error taxonomy surfaced by the user use cases to the API layer.

Storage-level failures are reclassified into these before leaving a use case;
the API layer maps each class to a status code and a stable message.
"""

# Standard library imports
from typing import Sequence

# Local application imports
from .validation import ValidationErrorDetail


class UserServiceError(Exception):
    """Base exception for all user use case errors"""

    code = "E_INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class InvalidInputError(UserServiceError):
    """Raised when the request payload fails a field rule"""

    code = "E_MISSING_OR_INVALID_PARAMS"

    def __init__(self, details: Sequence[ValidationErrorDetail]) -> None:
        super().__init__(self.code)
        self.details = tuple(details)


class ConflictError(UserServiceError):
    """Raised when a write collides with an existing user's unique email"""

    code = "E_DUPLICATE_EMAIL"


class InternalError(UserServiceError):
    """Raised for any storage or unexpected failure"""

    code = "E_INTERNAL_SERVER_ERROR"
