"""User directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import CurrentUserDependency
from ...schemas import UserPublic
from ...services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublic], summary="List registered users")
async def list_users() -> list[UserPublic]:
    users = await UserService().list_users()
    return [UserPublic.from_document(user) for user in users]


@router.get("/{user_name}", response_model=UserPublic, summary="Retrieve a user by user name")
async def get_user(user_name: str, current_user: CurrentUserDependency) -> UserPublic:
    user = await UserService().require_user(user_name)
    return UserPublic.from_document(user)
