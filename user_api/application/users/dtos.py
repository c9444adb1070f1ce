"""DTOs returned by the user service."""

from dataclasses import dataclass
from datetime import date

from user_api.domain.users.entities.user import User


@dataclass(frozen=True)
class UserDTO:
    """User as returned after a create or update."""

    id: int
    name: str
    dob: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id.value, name=user.name, dob=user.date_of_birth.isoformat())


@dataclass(frozen=True)
class UserWithAgeDTO:
    """User with the age derived as of ``today``, returned by reads and lists."""

    id: int
    name: str
    dob: str
    age: int

    @classmethod
    def from_entity(cls, user: User, today: date) -> "UserWithAgeDTO":
        return cls(
            id=user.id.value,
            name=user.name,
            dob=user.date_of_birth.isoformat(),
            age=user.age(today),
        )
