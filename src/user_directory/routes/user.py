"""User API routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from user_directory.controllers import UserController, get_user_controller

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.get("", response_class=JSONResponse)
async def fetch_all_usernames(controller: UserController = Depends(get_user_controller)) -> Response:
    return controller.handle_list_usernames()


@router.get("/")
async def fetch_by_missing_id(controller: UserController = Depends(get_user_controller)) -> Response:
    return controller.handle_get_by_id(None)


@router.get("/{user_id}")
async def fetch_by_id(user_id: str, controller: UserController = Depends(get_user_controller)) -> Response:
    return controller.handle_get_by_id(user_id)
