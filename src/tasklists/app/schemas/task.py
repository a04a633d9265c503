"""Task-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import Task, TaskPriority

TASK_READ_EXAMPLE = {
    "id": "665f1c2e9b1e8a3d4c2b1a01",
    "taskID": "buy-milk",
    "taskName": "Buy milk",
    "notes": "Semi-skimmed",
    "priority": TaskPriority.MEDIUM.value,
    "completed": False,
    "list": "665f1c2e9b1e8a3d4c2b1a00",
}


class TaskCreate(BaseModel):
    """Payload for creating a task; ``taskID`` is generated when omitted."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "taskName": "Buy milk",
                "notes": "Semi-skimmed",
                "priority": TaskPriority.MEDIUM.value,
            }
        },
    )

    task_id: str | None = Field(default=None, alias="taskID", max_length=128)
    task_name: str | None = Field(default=None, alias="taskName", max_length=255)
    notes: str | None = None
    priority: TaskPriority | None = None
    completed: bool = False


class TaskUpdate(BaseModel):
    """Payload for partially updating an existing task."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"completed": True}},
    )

    task_name: str | None = Field(default=None, alias="taskName", min_length=1, max_length=255)
    notes: str | None = None
    priority: TaskPriority | None = None
    completed: bool | None = None

    @model_validator(mode="after")
    def _ensure_payload_not_empty(self) -> "TaskUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update.")
        return self


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: str
    task_id: str = Field(alias="taskID")
    task_name: str = Field(alias="taskName")
    notes: str | None = None
    priority: TaskPriority | None = None
    completed: bool
    list_ref: str = Field(alias="list")

    @classmethod
    def from_document(cls, task: Task) -> "TaskRead":
        return cls(
            id=str(task.id),
            task_id=task.task_id,
            task_name=task.task_name,
            notes=task.notes,
            priority=task.priority,
            completed=task.completed,
            list_ref=str(task.list_ref),
        )


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
