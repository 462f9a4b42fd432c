"""
Request validation for the user use cases.

Rules are declared on the pydantic request DTOs; this module runs them and
turns pydantic errors into ``ValidationResult`` details. Pydantic reports
fields in declaration order, so ``details[0]`` is the first invalid field
(email before fullName on create, id before fullName on update).
"""

# Standard library imports
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Type

# External package imports
from pydantic import BaseModel, ValidationError as PydanticValidationError

# Local application imports
from ...domain.constants import UserFields
from ..dto.user_dto import UserCreateRequest, UserIdRequest, UserUpdateRequest
from .results import ValidationErrorDetail, ValidationKind, ValidationResult


_KINDS = {
    "missing": ValidationKind.REQUIRED,
    "string_type": ValidationKind.INVALID_TYPE,
    "model_type": ValidationKind.INVALID_TYPE,
    "dict_type": ValidationKind.INVALID_TYPE,
    "string_too_short": ValidationKind.TOO_SHORT,
    "string_too_long": ValidationKind.TOO_LONG,
    "string_pattern_mismatch": ValidationKind.PATTERN_MISMATCH,
    "value_error": ValidationKind.INVALID_FORMAT,
    "json_invalid": ValidationKind.INVALID_FORMAT,
}

_FORMAT_MESSAGES = {
    UserFields.EMAIL: "must be a valid email",
    UserFields.ID: "must be a valid ObjectId",
}


def translate_errors(
    errors: Iterable[Dict[str, Any]],
    data: Any = None,
) -> List[ValidationErrorDetail]:
    """
    Convert pydantic error dicts into validation details, preserving order

    Args:
        errors: Output of ``ValidationError.errors()``; a leading ``"body"``
            location (FastAPI request errors) is dropped from paths
        data: The raw input, used to tell empty strings from short ones
    """
    details = []
    for error in errors:
        path = tuple(str(loc) for loc in error.get("loc", ()) if loc != "body")
        raw = _raw_value(data, path, error)
        kind = _classify(error, raw)
        details.append(
            ValidationErrorDetail(message=_message(kind, path, raw, error), path=path, kind=kind)
        )
    return details


def _raw_value(data: Any, path: Tuple[str, ...], error: Dict[str, Any]) -> Any:
    if len(path) == 1 and isinstance(data, Mapping):
        return data.get(path[0])
    return error.get("input")


def _classify(error: Dict[str, Any], raw: Any) -> ValidationKind:
    error_type = error.get("type", "")
    if error_type == "string_type" and raw is None:
        return ValidationKind.REQUIRED
    if error_type in ("string_too_short", "value_error") and isinstance(raw, str) and not raw.strip():
        return ValidationKind.EMPTY
    return _KINDS.get(error_type, ValidationKind.INVALID_FORMAT)


def _message(kind: ValidationKind, path: Tuple[str, ...], raw: Any, error: Dict[str, Any]) -> str:
    if not path:
        if kind is ValidationKind.INVALID_TYPE:
            return '"value" must be of type object'
        return error.get("msg", "")

    label = path[-1]
    ctx = error.get("ctx") or {}
    if kind is ValidationKind.REQUIRED:
        return f'"{label}" is required'
    if kind is ValidationKind.INVALID_TYPE:
        return f'"{label}" must be a string'
    if kind is ValidationKind.EMPTY:
        return f'"{label}" is not allowed to be empty'
    if kind is ValidationKind.TOO_SHORT:
        return f'"{label}" length must be at least {ctx.get("min_length")} characters long'
    if kind is ValidationKind.TOO_LONG:
        return f'"{label}" length must be less than or equal to {ctx.get("max_length")} characters long'
    if kind is ValidationKind.PATTERN_MISMATCH:
        value = raw.strip() if isinstance(raw, str) else raw
        return f'"{label}" with value "{value}" fails to match the required pattern: /{ctx.get("pattern")}/'
    if label in _FORMAT_MESSAGES:
        return f'"{label}" {_FORMAT_MESSAGES[label]}'
    return error.get("msg", "")


class UserValidator:
    """Validates user request payloads against the request DTOs, one method per operation"""

    def validate_create(self, data: Any) -> ValidationResult:
        """Validate a create payload: ``email`` then ``fullName``"""
        return self._validate(UserCreateRequest, data)

    def validate_find_by_id(self, data: Any) -> ValidationResult:
        return self._validate(UserIdRequest, data)

    def validate_update_by_id(self, data: Any) -> ValidationResult:
        """Validate an update payload: ``id`` then ``fullName``. Email is not updatable."""
        return self._validate(UserUpdateRequest, data)

    def validate_delete_by_id(self, data: Any) -> ValidationResult:
        return self._validate(UserIdRequest, data)

    @staticmethod
    def _validate(request_model: Type[BaseModel], data: Any) -> ValidationResult:
        try:
            request = request_model.model_validate(data)
        except PydanticValidationError as e:
            return ValidationResult.failure(translate_errors(e.errors(), data))
        return ValidationResult.success(request.model_dump(by_alias=True))
