"""Application service for user CRUD."""

from collections.abc import Callable
from datetime import date

import structlog

from user_api.application.common.pagination import PaginatedResult, Pagination
from user_api.application.users.dtos import UserDTO, UserWithAgeDTO
from user_api.application.users.protocols.logger import LoggerProtocol
from user_api.application.users.protocols.user_repository import UserRepositoryProtocol
from user_api.domain.common.value_objects.date_of_birth import (
    DateOfBirth,
    DateOfBirthParseError,
)
from user_api.domain.common.value_objects.ids import UserId
from user_api.domain.users.entities.user import validate_name
from user_api.domain.users.exceptions import UserNotFoundError
from user_api.exceptions import StoreError


class UserService:
    """
    Business rules for users on top of the store.

    Every successful mutation and every failure is logged with the
    operation name and, where there is one, the user id. Errors are
    re-raised unchanged so the HTTP layer can map them.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        logger: LoggerProtocol | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            user_repository: Store adapter
            logger: structlog-style logger; defaults to this module's logger
            clock: Returns the current date, called once per age computation
        """
        self.user_repository = user_repository
        self.logger: LoggerProtocol = (
            logger if logger is not None else structlog.get_logger(__name__)
        )
        self.clock = clock

    def create_user(self, name: str, dob: str) -> UserDTO:
        """
        Create a user.

        Raises:
            ValidationError: If the name breaks the name rule
            DateOfBirthParseError: If dob is not a valid YYYY-MM-DD date
            StoreError: If the store fails
        """
        validate_name(name)
        date_of_birth = self._parse_dob(dob, operation="create_user")

        try:
            user = self.user_repository.create(name, date_of_birth.value)
        except StoreError as e:
            self.logger.error("user_create_failed", operation="create_user", error=str(e))
            raise

        self.logger.info(
            "user_created", operation="create_user", user_id=user.id.value, name=user.name
        )
        return UserDTO.from_entity(user)

    def get_user(self, user_id: int) -> UserWithAgeDTO:
        """
        Get a user with age computed as of today.

        Raises:
            UserNotFoundError: If no user has this id
            StoreError: If the store fails
        """
        try:
            user = self.user_repository.find_by_id(self._to_user_id(user_id))
        except UserNotFoundError:
            user = None
        except StoreError as e:
            self.logger.error(
                "user_get_failed", operation="get_user", user_id=user_id, error=str(e)
            )
            raise

        if user is None:
            self.logger.error(
                "user_get_failed", operation="get_user", user_id=user_id, error="not found"
            )
            raise UserNotFoundError(user_id)

        self.logger.info("user_retrieved", operation="get_user", user_id=user_id)
        return UserWithAgeDTO.from_entity(user, self.clock())

    def list_users(
        self, page: int | None = None, page_size: int | None = None
    ) -> PaginatedResult[UserWithAgeDTO]:
        """
        List one page of users with ages.

        The whole collection is fetched and sliced in memory; page and
        page_size are normalized before the store is touched.

        Raises:
            StoreError: If listing or counting fails
        """
        pagination = Pagination.normalize(page, page_size)

        try:
            users = self.user_repository.list_all()
        except StoreError as e:
            self.logger.error("user_list_failed", operation="list_users", error=str(e))
            raise

        try:
            total = self.user_repository.count()
        except StoreError as e:
            self.logger.error("user_count_failed", operation="list_users", error=str(e))
            raise

        today = self.clock()
        items = [UserWithAgeDTO.from_entity(user, today) for user in pagination.slice(users)]

        self.logger.info(
            "users_listed",
            operation="list_users",
            page=pagination.page,
            page_size=pagination.page_size,
            count=len(items),
            total=total,
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def update_user(self, user_id: int, name: str, dob: str) -> UserDTO:
        """
        Replace a user's name and date of birth.

        Raises:
            ValidationError: If the name breaks the name rule
            DateOfBirthParseError: If dob is not a valid YYYY-MM-DD date
            UserNotFoundError: If no user has this id
            StoreError: If the store fails
        """
        validate_name(name)
        date_of_birth = self._parse_dob(dob, operation="update_user", user_id=user_id)

        try:
            user = self.user_repository.update(
                self._to_user_id(user_id), name, date_of_birth.value
            )
        except UserNotFoundError:
            user = None
        except StoreError as e:
            self.logger.error(
                "user_update_failed", operation="update_user", user_id=user_id, error=str(e)
            )
            raise

        if user is None:
            self.logger.error(
                "user_update_failed", operation="update_user", user_id=user_id, error="not found"
            )
            raise UserNotFoundError(user_id)

        self.logger.info(
            "user_updated", operation="update_user", user_id=user_id, name=user.name
        )
        return UserDTO.from_entity(user)

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this id
            StoreError: If the store fails
        """
        try:
            deleted = self.user_repository.delete(self._to_user_id(user_id))
        except UserNotFoundError:
            deleted = False
        except StoreError as e:
            self.logger.error(
                "user_delete_failed", operation="delete_user", user_id=user_id, error=str(e)
            )
            raise

        if not deleted:
            self.logger.error(
                "user_delete_failed", operation="delete_user", user_id=user_id, error="not found"
            )
            raise UserNotFoundError(user_id)

        self.logger.info("user_deleted", operation="delete_user", user_id=user_id)

    def _parse_dob(self, dob: str, operation: str, user_id: int | None = None) -> DateOfBirth:
        try:
            return DateOfBirth.parse(dob)
        except DateOfBirthParseError as e:
            self.logger.error(
                "date_of_birth_parse_failed",
                operation=operation,
                user_id=user_id,
                error=e.message,
            )
            raise

    @staticmethod
    def _to_user_id(user_id: int) -> UserId:
        # Ids the store can never have assigned are reported as absent
        try:
            return UserId(user_id)
        except ValueError:
            raise UserNotFoundError(user_id) from None
