"""Task document stored in the ``tasks`` collection."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from beanie import Document, PydanticObjectId, Replace, Save, before_event
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from .common import utcnow


class TaskPriority(str, Enum):
    """Priority levels offered by the client."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Task(Document):
    """A single to-do item belonging to a list."""

    task_id: str
    task_name: str
    notes: str | None = None
    priority: TaskPriority | None = None
    completed: bool = False
    list_ref: PydanticObjectId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Replace, Save)
    def _touch(self) -> None:
        self.updated_at = utcnow()

    class Settings:
        name = "tasks"
        indexes = [
            IndexModel([("task_id", ASCENDING)], name="tasks_task_id", unique=True),
            IndexModel([("list_ref", ASCENDING)], name="tasks_list_ref"),
        ]


__all__ = ["Task", "TaskPriority"]
