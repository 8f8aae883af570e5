"""Models package."""

from user_directory.models.health import HealthCheckResponse
from user_directory.models.user import User

__all__ = [
    "HealthCheckResponse",
    "User",
]
