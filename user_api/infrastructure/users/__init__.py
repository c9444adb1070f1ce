"""Users infrastructure layer."""

from user_api.infrastructure.users.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]
