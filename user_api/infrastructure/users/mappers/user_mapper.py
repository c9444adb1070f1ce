"""Mapper for User ORM ↔ Domain conversion."""

from user_api.domain.common.value_objects.date_of_birth import DateOfBirth
from user_api.domain.common.value_objects.ids import UserId
from user_api.domain.users.entities.user import User
from user_api.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            date_of_birth=DateOfBirth(orm_model.dob),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )
