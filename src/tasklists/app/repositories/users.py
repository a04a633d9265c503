"""Repository for ``User`` documents."""

from __future__ import annotations

from beanie import PydanticObjectId
from beanie.operators import Pull, Push

from ..models import User
from .base import BaseRepository


def normalise_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Lookups and list-reference updates on ``User`` documents."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_user_name(self, user_name: str) -> User | None:
        return await User.find_one(User.user_name == user_name)

    async def get_by_email(self, email: str) -> User | None:
        """Look up a user by email; addresses are stored lower-cased."""
        return await User.find_one(User.email == normalise_email(email))

    async def push_list(self, user_id: PydanticObjectId, list_id: PydanticObjectId) -> None:
        """Append a list reference to the user's ordered ``lists``."""
        await User.find_one(User.id == user_id).update(Push({User.lists: list_id}))

    async def pull_list(self, user_id: PydanticObjectId, list_id: PydanticObjectId) -> None:
        await User.find_one(User.id == user_id).update(Pull({User.lists: list_id}))
