"""Repository for ``TodoList`` documents."""

from __future__ import annotations

from beanie import PydanticObjectId
from beanie.operators import Pull, Push

from ..models import TodoList
from .base import BaseRepository


class ListRepository(BaseRepository[TodoList]):
    """Lookups and task-reference updates on ``TodoList`` documents."""

    def __init__(self) -> None:
        super().__init__(TodoList)

    async def get_by_list_id(self, list_id: str) -> TodoList | None:
        return await TodoList.find_one(TodoList.list_id == list_id)

    async def get_for_owner(self, list_id: str, owner_id: PydanticObjectId) -> TodoList | None:
        """Retrieve a list by its client identifier, scoped to ``owner_id``."""
        return await TodoList.find_one(
            TodoList.list_id == list_id,
            TodoList.created_by == owner_id,
        )

    async def list_for_owner(self, owner_id: PydanticObjectId) -> list[TodoList]:
        return await TodoList.find(TodoList.created_by == owner_id).to_list()

    async def push_task(self, list_ref: PydanticObjectId, task_ref: PydanticObjectId) -> None:
        """Append a task reference to the list's ordered ``tasks``."""
        await TodoList.find_one(TodoList.id == list_ref).update(Push({TodoList.tasks: task_ref}))

    async def pull_task(self, list_ref: PydanticObjectId, task_ref: PydanticObjectId) -> None:
        await TodoList.find_one(TodoList.id == list_ref).update(Pull({TodoList.tasks: task_ref}))
