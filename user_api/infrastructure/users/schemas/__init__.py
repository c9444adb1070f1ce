"""Users context schemas."""

from user_api.infrastructure.users.schemas.user_schemas import (
    CreateUserRequest,
    PaginatedUsersResponse,
    UpdateUserRequest,
    UserResponse,
    UserWithAgeResponse,
)

__all__ = [
    "CreateUserRequest",
    "PaginatedUsersResponse",
    "UpdateUserRequest",
    "UserResponse",
    "UserWithAgeResponse",
]
