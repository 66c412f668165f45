"""Health check endpoint."""

from fastapi import APIRouter

from quizstore.web.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report liveness, package version and server time."""
    return HealthResponse()
