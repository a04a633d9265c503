"""Schemas describing authentication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .user import UserPublic


class RegisterRequest(BaseModel):
    """Incoming payload for registering a new user.

    Every field is optional at the schema level so that a missing field is
    reported with the service's own message rather than a schema error.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userName": "jdoe",
                "email": "jdoe@example.com",
                "firstName": "Jane",
                "lastName": "Doe",
                "password": "correct horse battery staple",
            }
        },
    )

    user_name: str | None = Field(default=None, alias="userName")
    email: EmailStr | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    password: str | None = None

    @field_validator("user_name", "email", "first_name", "last_name", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(BaseModel):
    """Credentials submitted to ``POST /login``."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str | None = Field(default=None, alias="userName")
    password: str | None = None


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_name: str = Field(alias="userName")


class RegisterResponse(BaseModel):
    """Created user together with a freshly issued token."""

    user: UserPublic
    token: str


class TokenPayload(BaseModel):
    """Validated JWT payload."""

    model_config = ConfigDict(extra="ignore")

    sub: str
    exp: datetime
    iat: datetime
    jti: str


__all__ = [
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "TokenPayload",
]
