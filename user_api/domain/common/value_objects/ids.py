from dataclasses import dataclass

# Identifiers are stored in a 32-bit integer column
MAX_ID_VALUE = 2**31 - 1


@dataclass(frozen=True)
class UserId:
    """Strongly-typed user identifier, assigned by the store."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1 or self.value > MAX_ID_VALUE:
            raise ValueError(f"UserId must be between 1 and {MAX_ID_VALUE}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
