from typing import Protocol

from user_api.application.common.pagination import PaginatedResult
from user_api.application.users.dtos import UserDTO, UserWithAgeDTO


class UserServiceProtocol(Protocol):
    """Operations the HTTP layer can invoke on users."""

    def create_user(self, name: str, dob: str) -> UserDTO: ...

    def get_user(self, user_id: int) -> UserWithAgeDTO: ...

    def list_users(
        self, page: int | None, page_size: int | None
    ) -> PaginatedResult[UserWithAgeDTO]: ...

    def update_user(self, user_id: int, name: str, dob: str) -> UserDTO: ...

    def delete_user(self, user_id: int) -> None: ...
