"""Application factory for the User Directory API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from user_directory.config import Settings, get_settings
from user_directory.middleware import get_cors_headers, setup_middleware
from user_directory.routes import api_router
from user_directory.services import build_user_store
from user_directory.services.user_store import UserStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(level=settings.log_level.upper())


def create_app(settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings, loaded from the environment if omitted
        store: User store to serve, built from ``settings.user_seed`` if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    # Fails fast on an unknown seed variant
    store = store if store is not None else build_user_store(settings.user_seed)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"User seed: {settings.user_seed} ({len(store)} users)")

        yield

        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="User Directory - read-only FastAPI service",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_store = store

    # Setup middleware (must be before exception handlers)
    setup_middleware(app, cors_origins=settings.cors_origins, environment=settings.environment)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler to ensure CORS headers are present on server errors."""
        logger.error("Unhandled exception: %s", exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, cors_origins=settings.cors_origins, environment=settings.environment)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
            headers=cors_headers,
        )

    app.include_router(api_router)

    return app
