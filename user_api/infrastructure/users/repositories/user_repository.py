"""Repository for User domain entities."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date
from typing import TypeVar

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_api.domain.common.value_objects.ids import UserId
from user_api.domain.users.entities.user import User
from user_api.exceptions import StoreError
from user_api.infrastructure.users.mappers.user_mapper import UserMapper
from user_api.models import User as UserORM

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class UserRepository:
    """
    SQLAlchemy store adapter for users.

    Each mutation runs in its own transaction. Any ``SQLAlchemyError``
    rolls the session back and is re-raised as ``StoreError``.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    @contextmanager
    def _store_call(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("store_call_failed", operation=operation, error=str(e))
            raise StoreError(f"Failed to {operation.replace('_', ' ')}", operation) from e

    def create(self, name: str, dob: date) -> User:
        """
        Insert a user.

        Returns:
            Created user entity with its store-assigned id
        """
        with self._store_call("create_user"):
            orm_model = UserORM(name=name, dob=dob)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Returns:
            User entity if found, None otherwise
        """
        with self._store_call("get_user"):
            orm_model = self._get(user_id)
            return self.mapper.to_domain(orm_model) if orm_model else None

    def list_all(self) -> list[User]:
        """Return every user ordered by ascending id."""
        with self._store_call("list_users"):
            stmt = select(UserORM).order_by(UserORM.id)
            return [self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars()]

    def count(self) -> int:
        """Return the number of stored users."""
        with self._store_call("count_users"):
            stmt = select(func.count()).select_from(UserORM)
            return self.db.execute(stmt).scalar_one()

    def update(self, user_id: UserId, name: str, dob: date) -> User | None:
        """
        Replace name and date of birth.

        Returns:
            Updated user entity, or None if no user has this id
        """
        return self._mutate("update_user", user_id, lambda orm: self._apply(orm, name, dob))

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Returns:
            True if a row was deleted, False if no user has this id
        """
        return self._mutate("delete_user", user_id, self._remove) is not None

    def _get(self, user_id: UserId) -> UserORM | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def _apply(self, orm_model: UserORM, name: str, dob: date) -> User:
        orm_model.name = name
        orm_model.dob = dob
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def _remove(self, orm_model: UserORM) -> bool:
        self.db.delete(orm_model)
        self.db.commit()
        return True

    def _mutate(
        self, operation: str, user_id: UserId, action: Callable[[UserORM], T]
    ) -> T | None:
        with self._store_call(operation):
            orm_model = self._get(user_id)
            if orm_model is None:
                return None
            return action(orm_model)
