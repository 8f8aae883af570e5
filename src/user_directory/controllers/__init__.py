"""Controller initialization and dependency injection."""

from fastapi import Depends, Request

from user_directory.controllers.user_controller import UserController, UserIdParseResult, parse_user_id
from user_directory.services import get_user_store
from user_directory.services.user_store import UserStore


def get_user_controller(request: Request, store: UserStore = Depends(get_user_store)) -> UserController:
    """Get a UserController bound to the application's store and settings.

    Args:
        request: Incoming request
        store: User store from the application state

    Returns:
        UserController instance
    """
    settings = request.app.state.settings
    return UserController(store, not_found_status_code=settings.not_found_status_code)


__all__ = ["UserController", "UserIdParseResult", "get_user_controller", "parse_user_id"]
