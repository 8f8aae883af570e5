"""Service initialization and dependency injection."""

from fastapi import Request

from user_directory.services.seed_data import build_user_store
from user_directory.services.user_store import InMemoryUserStore, UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the user store the application was started with.

    Args:
        request: Incoming request

    Returns:
        UserStore held on the application state
    """
    return request.app.state.user_store


__all__ = ["InMemoryUserStore", "UserStore", "build_user_store", "get_user_store"]
