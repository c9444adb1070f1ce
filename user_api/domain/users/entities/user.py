"""User entity."""

from dataclasses import dataclass
from datetime import date, datetime

from user_api.domain.common.exceptions import ValidationError
from user_api.domain.common.value_objects.date_of_birth import DateOfBirth
from user_api.domain.common.value_objects.ids import UserId
from user_api.domain.users.services.age_calculator import calculate_age

# Domain constraints
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 255


def validate_name(name: str) -> None:
    """
    Check the name rule shared by creation and update.

    Raises:
        ValidationError: If the name is empty or longer than MAX_NAME_LENGTH
    """
    if not name:
        raise ValidationError(field="name", reason="is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            field="name", reason=f"must be at most {MAX_NAME_LENGTH} characters"
        )


@dataclass(eq=False)
class User:
    """
    User entity as stored.

    Business Rules:
    - Identifier is assigned by the store and never changes
    - Name is 1..MAX_NAME_LENGTH characters
    - Age is derived on demand and never stored
    """

    id: UserId
    name: str
    date_of_birth: DateOfBirth
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        validate_name(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def age(self, today: date | None = None) -> int:
        """Age in whole years as of ``today``."""
        return calculate_age(self.date_of_birth.value, today)

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        name: str,
        date_of_birth: DateOfBirth,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "User":
        """
        Reconstitute a user from persistence.

        Raises:
            ValidationError: If the stored name breaks the name rule
        """
        return cls(
            id=id,
            name=name,
            date_of_birth=date_of_birth,
            created_at=created_at,
            updated_at=updated_at,
        )
