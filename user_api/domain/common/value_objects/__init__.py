from .date_of_birth import DATE_FORMAT, DateOfBirth, DateOfBirthParseError
from .ids import UserId

__all__ = [
    "DATE_FORMAT",
    "DateOfBirth",
    "DateOfBirthParseError",
    "UserId",
]
