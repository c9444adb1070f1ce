"""Common infrastructure schemas."""

from user_api.infrastructure.common.schemas.response_wrappers import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
