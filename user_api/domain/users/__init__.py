"""Users domain layer."""

from user_api.domain.users.entities.user import User
from user_api.domain.users.exceptions import UserNotFoundError
from user_api.domain.users.services.age_calculator import calculate_age

__all__ = [
    "User",
    "UserNotFoundError",
    "calculate_age",
]
