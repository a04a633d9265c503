"""Authentication service encapsulating registration and login."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.config import Settings
from ..core.security import GeneratedToken, generate_access_token, verify_password
from ..errors import AuthError, ConflictError, ValidationError
from ..models import User
from .users import UserService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthResult:
    """A user paired with the access token issued for them."""

    user: User
    token: GeneratedToken


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class AuthService:
    """Registration, credential checks and token issuance."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._user_service = UserService()

    def issue_token(self, user_name: str) -> GeneratedToken:
        return generate_access_token(user_name, settings=self._settings)

    async def register(
        self,
        *,
        user_name: str | None,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
        password: str | None,
    ) -> AuthResult:
        """Create an account and sign a token for it."""
        fields = (user_name, email, first_name, last_name, password)
        if any(_is_blank(value) for value in fields):
            raise ValidationError("All fields are required.")

        if await self._user_service.get_user_by_email(email) is not None:
            raise ConflictError("Email already exists")
        if await self._user_service.get_user_by_user_name(user_name) is not None:
            raise ConflictError("Username already exists")

        user = await self._user_service.create_user(
            user_name=user_name,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password=password,
        )
        logger.info("User registered", extra={"user_name": user_name})
        return AuthResult(user=user, token=self.issue_token(user.user_name))

    async def authenticate(self, user_name: str | None, password: str | None) -> User:
        """Return the user for valid credentials or raise."""
        if _is_blank(user_name) or not password:
            raise ValidationError("Username and password are required")

        user = await self._user_service.get_user_by_user_name(user_name)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("Rejected login attempt", extra={"user_name": user_name})
            raise AuthError("Invalid username or password")
        return user

    async def login(self, user_name: str | None, password: str | None) -> AuthResult:
        user = await self.authenticate(user_name, password)
        logger.info("User logged in", extra={"user_name": user.user_name})
        return AuthResult(user=user, token=self.issue_token(user.user_name))


__all__ = ["AuthResult", "AuthService"]
