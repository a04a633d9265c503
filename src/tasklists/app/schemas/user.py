"""User-facing Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models import User


class UserPublic(BaseModel):
    """Public representation of a user; never carries the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_name: str = Field(alias="userName")
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    lists: list[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, user: User) -> "UserPublic":
        return cls(
            id=str(user.id),
            user_name=user.user_name,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            lists=[str(ref) for ref in user.lists],
        )


__all__ = ["UserPublic"]
