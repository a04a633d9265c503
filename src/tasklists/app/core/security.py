"""Security helpers for password hashing and JWT access tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from .config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(slots=True)
class GeneratedToken:
    """A signed access token and its expiry."""

    token: str
    expires_at: datetime
    jti: str


def get_password_hash(password: str) -> str:
    """Return a bcrypt hash of ``password``."""

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_access_token(
    user_name: str,
    *,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> GeneratedToken:
    """Sign an access token identifying ``user_name``.

    Signing errors raised by ``jose`` are not caught here; callers see them
    as a failed operation.
    """

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = now + expires_delta
    payload: dict[str, Any] = {
        "sub": user_name,
        "iat": now,
        "exp": expire,
        "jti": uuid4().hex,
    }
    token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return GeneratedToken(token=token, expires_at=expire, jti=payload["jti"])


def decode_token(*, token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Decode a JWT and return its payload; raises ``JWTError`` when invalid."""

    return jwt.decode(token, secret, algorithms=[algorithm])


__all__ = [
    "ExpiredSignatureError",
    "GeneratedToken",
    "JWTError",
    "decode_token",
    "generate_access_token",
    "get_password_hash",
    "verify_password",
]
