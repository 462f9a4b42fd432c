from .user_dto import (
    UserCreateRequest,
    UserIdRequest,
    UserUpdateRequest,
    UserResponse,
    UpdateOutcomeResponse,
    DeleteOutcomeResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserIdRequest",
    "UserUpdateRequest",
    "UserResponse",
    "UpdateOutcomeResponse",
    "DeleteOutcomeResponse",
]
