"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or input cannot be accepted. They are
translated to HTTP responses by the infrastructure layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when client input is malformed or out of bounds.

    ``errors`` maps each offending field to a human readable reason,
    one entry per field. A single-field error can be built from
    ``field``/``reason``; the message then defaults to ``"<field> <reason>"``.

    Example:
        ValidationError.from_errors({"dob": "must be a valid date in format YYYY-MM-DD"})
    """

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        reason: str | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        collected = dict(errors or {})
        if field and reason:
            collected.setdefault(field, reason)
        if message is None:
            message = "; ".join(f"{name} {why}" for name, why in collected.items()) or (
                "Validation failed"
            )
        super().__init__(message)
        self.field = field
        self.errors = collected

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationError":
        """Build an error whose message lists every failing field."""
        return cls(errors=errors)


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a user by ID that doesn't exist.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
