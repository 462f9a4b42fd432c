"""Result types produced by request validation."""

# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


class ValidationKind(str, Enum):
    """Machine-readable reason a field failed validation"""
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    PATTERN_MISMATCH = "pattern_mismatch"
    INVALID_FORMAT = "invalid_format"
    # Uniqueness is enforced by the storage layer, never by a validator.
    NOT_UNIQUE_CHECKED_ELSEWHERE = "not_unique_checked_elsewhere"


@dataclass(frozen=True)
class ValidationErrorDetail:
    """A single field-level validation failure"""
    message: str
    path: Tuple[str, ...]
    kind: ValidationKind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "path": list(self.path),
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class ValidationError:
    """Ordered validation failures; ``details[0]`` is the first failure found"""
    details: Tuple[ValidationErrorDetail, ...]


@dataclass(frozen=True)
class ValidationResult:
    """
    Discriminated outcome of validating an input object.

    Exactly one of ``value`` (the validated, normalized input) and ``error``
    is set.
    """
    value: Optional[Dict[str, Any]] = None
    error: Optional[ValidationError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ValidationResult requires exactly one of value or error")

    @classmethod
    def success(cls, value: Dict[str, Any]) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, details: Sequence[ValidationErrorDetail]) -> "ValidationResult":
        if not details:
            raise ValueError("A failed ValidationResult needs at least one detail")
        return cls(error=ValidationError(details=tuple(details)))

    @property
    def is_valid(self) -> bool:
        return self.error is None
