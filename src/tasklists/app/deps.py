"""Reusable FastAPI dependencies for authentication and ownership checks."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from .core.config import Settings, get_settings
from .core.context import bind_user_name
from .core.security import JWTError, decode_token
from .errors import AuthError, AuthorizationError
from .models import User
from .repositories import UserRepository
from .schemas.auth import TokenPayload

SettingsDependency = Annotated[Settings, Depends(get_settings)]

_bearer_scheme = HTTPBearer(auto_error=False)


def _decode_access_token(token: str, settings: Settings) -> TokenPayload:
    try:
        payload = decode_token(
            token=token,
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
    except JWTError as exc:
        raise AuthError("Invalid or expired token.") from exc

    try:
        return TokenPayload.model_validate(payload)
    except PydanticValidationError as exc:
        raise AuthError("Invalid or expired token.") from exc


async def get_current_user(
    settings: SettingsDependency,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> User:
    """Resolve the bearer token on the request to a stored user.

    Raises ``AuthError`` when the header is absent or not a bearer credential,
    when the token fails verification, or when its subject no longer exists.
    """

    if credentials is None or not credentials.credentials:
        raise AuthError("Authentication required.")

    token_payload = _decode_access_token(credentials.credentials, settings)
    user = await UserRepository().get_by_user_name(token_payload.sub)
    if user is None:
        raise AuthError("Invalid or expired token.")
    bind_user_name(user.user_name)
    return user


CurrentUserDependency = Annotated[User, Depends(get_current_user)]


def ensure_owner(current_user: User, user_name: str, message: str) -> None:
    """Raise ``AuthorizationError`` unless ``current_user`` is ``user_name``."""

    if current_user.user_name != user_name:
        raise AuthorizationError(message)


__all__ = [
    "CurrentUserDependency",
    "SettingsDependency",
    "ensure_owner",
    "get_current_user",
]
