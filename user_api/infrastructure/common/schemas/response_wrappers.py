"""Common response schemas for API responses."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: bool = True
    msg: str
    details: dict[str, str] | None = Field(
        default=None, description="Field name to reason, for validation failures"
    )


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str
    message: str
