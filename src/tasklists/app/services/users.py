"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from ..core.security import get_password_hash
from ..errors import NotFoundError
from ..models import User
from ..repositories import UserRepository
from ..repositories.users import normalise_email

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` documents."""

    def __init__(self) -> None:
        self._repository = UserRepository()

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_user(
        self,
        *,
        user_name: str,
        email: str,
        first_name: str,
        last_name: str,
        password: str,
    ) -> User:
        """Hash ``password`` and persist a new user record."""
        user = User(
            user_name=user_name,
            email=normalise_email(email),
            first_name=first_name,
            last_name=last_name,
            hashed_password=get_password_hash(password),
        )
        await self._repository.add(user)
        logger.info("User created", extra={"user_name": user_name})
        return user

    async def get_user_by_user_name(self, user_name: str) -> User | None:
        return await self._repository.get_by_user_name(user_name)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def require_user(self, user_name: str) -> User:
        """Return the user named ``user_name`` or raise ``NotFoundError``."""
        user = await self._repository.get_by_user_name(user_name)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def list_users(self) -> list[User]:
        """Return all registered users."""
        return await self._repository.list()
