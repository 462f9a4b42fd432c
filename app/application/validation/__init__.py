from .results import ValidationError, ValidationErrorDetail, ValidationKind, ValidationResult
from .user_validator import UserValidator, translate_errors

__all__ = [
    "ValidationError",
    "ValidationErrorDetail",
    "ValidationKind",
    "ValidationResult",
    "UserValidator",
    "translate_errors",
]
