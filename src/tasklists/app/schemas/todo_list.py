"""List-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import TodoList

LIST_READ_EXAMPLE = {
    "id": "665f1c2e9b1e8a3d4c2b1a00",
    "listID": "groceries",
    "listName": "Groceries",
    "color": 2,
    "tasks": ["665f1c2e9b1e8a3d4c2b1a01"],
    "createdBy": "665f1c2e9b1e8a3d4c2b19ff",
}


class ListCreate(BaseModel):
    """Payload for creating a list; ``listID`` is generated when omitted."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"listID": "groceries", "listName": "Groceries", "color": 2}},
    )

    list_id: str | None = Field(default=None, alias="listID", max_length=128)
    list_name: str | None = Field(default=None, alias="listName", max_length=255)
    color: int | None = None


class ListUpdate(BaseModel):
    """Payload for partially updating a list."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"listName": "Weekly groceries"}},
    )

    list_name: str | None = Field(default=None, alias="listName", min_length=1, max_length=255)
    color: int | None = None

    @model_validator(mode="after")
    def _ensure_payload_not_empty(self) -> "ListUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update.")
        return self


class ListRead(BaseModel):
    """Public representation of a list."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": LIST_READ_EXAMPLE},
    )

    id: str
    list_id: str = Field(alias="listID")
    list_name: str = Field(alias="listName")
    color: int | None = None
    tasks: list[str] = Field(default_factory=list)
    created_by: str = Field(alias="createdBy")

    @classmethod
    def from_document(cls, todo_list: TodoList) -> "ListRead":
        return cls(
            id=str(todo_list.id),
            list_id=todo_list.list_id,
            list_name=todo_list.list_name,
            color=todo_list.color,
            tasks=[str(ref) for ref in todo_list.tasks],
            created_by=str(todo_list.created_by),
        )


__all__ = ["ListCreate", "ListRead", "ListUpdate"]
