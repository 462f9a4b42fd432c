from typing import Annotated

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field


FULL_NAME_MIN_LENGTH = 5
FULL_NAME_MAX_LENGTH = 30
FULL_NAME_PATTERN = r"^[a-zA-Z ]*$"
OBJECT_ID_LENGTH = 24


def _ensure_object_id(value: str) -> str:
    if len(value) != OBJECT_ID_LENGTH or not ObjectId.is_valid(value):
        raise ValueError("must be a valid ObjectId")
    return value


FullName = Annotated[
    str,
    Field(
        min_length=FULL_NAME_MIN_LENGTH,
        max_length=FULL_NAME_MAX_LENGTH,
        pattern=FULL_NAME_PATTERN,
    ),
]
ObjectIdStr = Annotated[str, AfterValidator(_ensure_object_id)]


class UserRequest(BaseModel):
    """Base for user request DTOs: strings are trimmed, unknown fields are kept and ignored"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="allow")


class UserCreateRequest(UserRequest):
    """DTO for user creation request"""
    email: EmailStr
    full_name: FullName = Field(alias="fullName")


class UserIdRequest(UserRequest):
    """DTO for find-by-id and delete-by-id requests"""
    id: ObjectIdStr


class UserUpdateRequest(UserRequest):
    """DTO for update-by-id request; email is not updatable"""
    id: ObjectIdStr
    full_name: FullName = Field(alias="fullName")


class UserResponse(BaseModel):
    """DTO for a stored user"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    full_name: str = Field(alias="fullName")


class UpdateOutcomeResponse(BaseModel):
    """DTO for the result of an update-by-id request"""
    matched: bool
    modified: bool


class DeleteOutcomeResponse(BaseModel):
    """DTO for the result of a delete-by-id request"""
    deleted: bool
