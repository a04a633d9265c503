"""Repository for ``Task`` documents."""

from __future__ import annotations

from beanie import PydanticObjectId

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self) -> None:
        super().__init__(Task)

    async def get_by_task_id(self, task_id: str) -> Task | None:
        return await Task.find_one(Task.task_id == task_id)

    async def get_for_list(self, task_id: str, list_ref: PydanticObjectId) -> Task | None:
        """Retrieve a task by its client identifier, scoped to ``list_ref``."""
        return await Task.find_one(Task.task_id == task_id, Task.list_ref == list_ref)

    async def list_for_list(self, list_ref: PydanticObjectId) -> list[Task]:
        return await Task.find(Task.list_ref == list_ref).to_list()

    async def delete_for_list(self, list_ref: PydanticObjectId) -> int:
        """Delete every task referencing ``list_ref`` and return how many went."""
        result = await Task.find(Task.list_ref == list_ref).delete()
        return result.deleted_count if result is not None else 0
