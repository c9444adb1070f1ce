from .logger import LoggerProtocol
from .user_repository import UserRepositoryProtocol
from .user_service import UserServiceProtocol

__all__ = [
    "LoggerProtocol",
    "UserRepositoryProtocol",
    "UserServiceProtocol",
]
