"""User document stored in the ``users`` collection."""

from __future__ import annotations

from datetime import datetime

from beanie import Document, PydanticObjectId, Replace, Save, before_event
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from .common import utcnow


class User(Document):
    """Registered account owning an ordered collection of lists."""

    user_name: str
    email: str
    first_name: str
    last_name: str
    hashed_password: str
    lists: list[PydanticObjectId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Replace, Save)
    def _touch(self) -> None:
        self.updated_at = utcnow()

    class Settings:
        name = "users"
        indexes = [
            IndexModel([("user_name", ASCENDING)], name="users_user_name", unique=True),
            IndexModel([("email", ASCENDING)], name="users_email", unique=True),
        ]


__all__ = ["User"]
