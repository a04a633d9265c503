"""List document stored in the ``lists`` collection."""

from __future__ import annotations

from datetime import datetime

from beanie import Document, PydanticObjectId, Replace, Save, before_event
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from .common import utcnow


class TodoList(Document):
    """A named, coloured collection of tasks owned by one user."""

    list_id: str
    list_name: str
    color: int | None = None
    tasks: list[PydanticObjectId] = Field(default_factory=list)
    created_by: PydanticObjectId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Replace, Save)
    def _touch(self) -> None:
        self.updated_at = utcnow()

    class Settings:
        name = "lists"
        indexes = [
            IndexModel([("list_id", ASCENDING)], name="lists_list_id", unique=True),
            IndexModel([("created_by", ASCENDING)], name="lists_created_by"),
        ]


__all__ = ["TodoList"]
