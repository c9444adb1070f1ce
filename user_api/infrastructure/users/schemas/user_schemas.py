from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field
from pydantic_core import PydanticCustomError

from user_api.application.common.pagination import PaginatedResult
from user_api.application.users.dtos import UserDTO, UserWithAgeDTO
from user_api.domain.common.value_objects.date_of_birth import (
    DATE_FORMAT,
    DateOfBirth,
    DateOfBirthParseError,
)
from user_api.domain.users.entities.user import MAX_NAME_LENGTH, MIN_NAME_LENGTH


def _check_date_of_birth(value: str) -> str:
    try:
        DateOfBirth.parse(value)
    except DateOfBirthParseError:
        raise PydanticCustomError(
            "date_format",
            "must be a valid date in format {format}",
            {"format": DATE_FORMAT},
        ) from None
    return value


DateOfBirthString = Annotated[
    str,
    Field(description=f"Date of birth ({DATE_FORMAT})", examples=["1990-05-10"]),
    AfterValidator(_check_date_of_birth),
]


class UserWriteRequest(BaseModel):
    """Fields shared by create and update; both are mandatory."""

    name: str = Field(
        ...,
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_NAME_LENGTH,
        description="User name",
        examples=["Ada"],
    )
    dob: DateOfBirthString


class CreateUserRequest(UserWriteRequest):
    """Schema for creating a user."""


class UpdateUserRequest(UserWriteRequest):
    """Schema for replacing a user's name and date of birth."""


class UserResponse(BaseModel):
    """Schema for a user returned after create or update."""

    id: int = Field(..., description="User id")
    name: str = Field(..., description="User name")
    dob: str = Field(..., description=f"Date of birth ({DATE_FORMAT})")

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(id=dto.id, name=dto.name, dob=dto.dob)


class UserWithAgeResponse(UserResponse):
    """Schema for a user with age derived at request time."""

    age: int = Field(..., ge=0, description="Age in whole years")

    @classmethod
    def from_dto(cls, dto: UserWithAgeDTO) -> "UserWithAgeResponse":  # type: ignore[override]
        return cls(id=dto.id, name=dto.name, dob=dto.dob, age=dto.age)


class PaginatedUsersResponse(BaseModel):
    """Schema for one page of users."""

    users: list[UserWithAgeResponse]
    total: int = Field(..., ge=0, description="Number of users across all pages")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)

    @classmethod
    def from_result(cls, result: PaginatedResult[UserWithAgeDTO]) -> "PaginatedUsersResponse":
        return cls(
            users=[UserWithAgeResponse.from_dto(item) for item in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
        )
