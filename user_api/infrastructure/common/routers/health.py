from fastapi import APIRouter

from user_api.infrastructure.common.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(status="ok", message="Server is running")
