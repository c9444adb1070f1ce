from datetime import date
from typing import Protocol

from user_api.domain.common.value_objects.ids import UserId
from user_api.domain.users.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Store contract for users.

    Implementations raise ``StoreError`` for any persistence failure and
    report absence by returning ``None``/``False``.
    """

    def create(self, name: str, dob: date) -> User: ...

    def find_by_id(self, user_id: UserId) -> User | None: ...

    def list_all(self) -> list[User]: ...

    def count(self) -> int: ...

    def update(self, user_id: UserId, name: str, dob: date) -> User | None: ...

    def delete(self, user_id: UserId) -> bool: ...
