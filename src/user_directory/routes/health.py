"""Health check routes."""

from fastapi import APIRouter, Depends, Request

from user_directory.models.health import HealthCheckResponse
from user_directory.services import get_user_store
from user_directory.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and directory size
    """
    settings = request.app.state.settings

    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=len(store),
    )
