import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from user_api.application.users.protocols.user_service import UserServiceProtocol
from user_api.core import container
from user_api.domain.common.exceptions import DomainError, ValidationError
from user_api.domain.common.value_objects.ids import MAX_ID_VALUE
from user_api.exceptions import StoreError
from user_api.infrastructure.common.di import inject_service
from user_api.infrastructure.common.schemas import ErrorResponse
from user_api.infrastructure.users.schemas import (
    CreateUserRequest,
    PaginatedUsersResponse,
    UpdateUserRequest,
    UserResponse,
    UserWithAgeResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

get_user_service = inject_service(container.user_service, db_kwarg="user_repository__db")

UserServiceDep = Annotated[UserServiceProtocol, Depends(get_user_service)]

# Plain ASCII decimal with an optional sign; no whitespace or underscores
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _parse_int(raw: str) -> int | None:
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    return int(raw)


def parse_user_id(user_id: str) -> int:
    """
    Path dependency for ``/users/{user_id}``.

    Raises:
        HTTPException: 400 unless the id is a positive 32-bit integer
    """
    value = _parse_int(user_id)
    if value is None or value < 1 or value > MAX_ID_VALUE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID"
        )
    return value


UserIdPath = Annotated[int, Depends(parse_user_id)]


def _optional_int(raw: str | None) -> int | None:
    # Unparseable query values fall back to the defaults
    if raw is None:
        return None
    return _parse_int(raw)


def _server_error(e: DomainError | StoreError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
    )


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
@router.post("", status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_user(request: CreateUserRequest, service: UserServiceDep) -> UserResponse:
    """Create a user from a name and a YYYY-MM-DD date of birth."""
    try:
        user = service.create_user(request.name, request.dob)
    except ValidationError:
        # Handled by the validation exception handler (400)
        raise
    except (DomainError, StoreError) as e:
        raise _server_error(e) from e
    return UserResponse.from_dto(user)


@router.get("/", responses=_ERROR_RESPONSES)
@router.get("", include_in_schema=False)
def list_users(
    service: UserServiceDep,
    page: str | None = None,
    page_size: str | None = None,
) -> PaginatedUsersResponse:
    """
    List users one page at a time.

    - ``page`` defaults to 1; values below 1 are treated as 1
    - ``page_size`` defaults to 10 and is capped at 100
    """
    try:
        result = service.list_users(_optional_int(page), _optional_int(page_size))
    except (DomainError, StoreError) as e:
        raise _server_error(e) from e
    return PaginatedUsersResponse.from_result(result)


@router.get(
    "/{user_id}",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
def get_user(user_id: UserIdPath, service: UserServiceDep) -> UserWithAgeResponse:
    """Get a user with their age in whole years."""
    try:
        user = service.get_user(user_id)
    except (DomainError, StoreError):
        # Not-found and store failures are reported alike
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        ) from None
    return UserWithAgeResponse.from_dto(user)


@router.put("/{user_id}", responses=_ERROR_RESPONSES)
def update_user(
    user_id: UserIdPath, request: UpdateUserRequest, service: UserServiceDep
) -> UserResponse:
    """Replace a user's name and date of birth."""
    try:
        user = service.update_user(user_id, request.name, request.dob)
    except ValidationError:
        raise
    except (DomainError, StoreError) as e:
        raise _server_error(e) from e
    return UserResponse.from_dto(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_user(user_id: UserIdPath, service: UserServiceDep) -> Response:
    """Delete a user."""
    try:
        service.delete_user(user_id)
    except (DomainError, StoreError) as e:
        raise _server_error(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
