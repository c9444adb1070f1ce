"""Application-level exception hierarchy."""


class UserApiError(Exception):
    """Base exception for application errors outside the domain."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StoreError(UserApiError):
    """Failure reported by the persistence layer.

    Covers connectivity problems, constraint violations and any other
    error raised while talking to the database. The underlying driver
    exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize with message and the store operation that failed."""
        self.operation = operation
        super().__init__(message, status_code=500)
