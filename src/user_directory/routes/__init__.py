"""Route initialization module."""

from fastapi import APIRouter

from user_directory.routes.health import router as health_router
from user_directory.routes.root import router as root_router
from user_directory.routes.user import router as user_router

# Create main router; the directory is served from the root path
api_router = APIRouter()


# Include sub-routers
api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(user_router)


__all__ = ["api_router"]
