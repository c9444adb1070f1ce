"""Date of birth value object.

One parser serves both request validation and the user service, so the
two layers can never disagree about which strings are valid dates.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from user_api.domain.common.exceptions import DomainError

# Human readable form used in error messages
DATE_FORMAT = "YYYY-MM-DD"

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DateOfBirthParseError(DomainError):
    """Raised by :meth:`DateOfBirth.parse` for a malformed or impossible date."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid date of birth {text!r}: expected format {DATE_FORMAT}")
        self.text = text


@dataclass(frozen=True)
class DateOfBirth:
    """A calendar date with no time component."""

    value: date

    @classmethod
    def parse(cls, text: str) -> "DateOfBirth":
        """
        Parse a strict ``YYYY-MM-DD`` string.

        Four-digit year, two-digit month and day, and the result must be a
        real calendar date (``2021-02-30`` is rejected).

        Raises:
            DateOfBirthParseError: If the text does not match or is not a date
        """
        if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
            raise DateOfBirthParseError(text)
        try:
            parsed = datetime.strptime(text, "%Y-%m-%d").date()  # noqa: DTZ007
        except ValueError as e:
            raise DateOfBirthParseError(text) from e
        return cls(parsed)

    def isoformat(self) -> str:
        """Render as ``YYYY-MM-DD``."""
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()
