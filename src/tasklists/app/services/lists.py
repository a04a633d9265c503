"""Service layer for a user's lists, including the cascading delete."""

from __future__ import annotations

import logging
from uuid import uuid4

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import TodoList, User
from ..repositories import ListRepository, TaskRepository, UserRepository

logger = logging.getLogger(__name__)

_UNSET = object()


class ListService:
    """High-level business orchestration for ``TodoList`` documents."""

    def __init__(self) -> None:
        self._repository = ListRepository()
        self._task_repository = TaskRepository()
        self._user_repository = UserRepository()

    @property
    def repository(self) -> ListRepository:
        return self._repository

    async def list_lists(self, owner: User) -> list[TodoList]:
        """Return the owner's lists in the order recorded on the user."""
        lists = await self._repository.list_for_owner(owner.id)
        position = {ref: index for index, ref in enumerate(owner.lists)}
        return sorted(lists, key=lambda item: position.get(item.id, len(position)))

    async def get_list(self, owner: User, list_id: str) -> TodoList:
        """Resolve ``list_id`` within the owner's lists or raise ``NotFoundError``."""
        todo_list = await self._repository.get_for_owner(list_id, owner.id)
        if todo_list is None:
            raise NotFoundError("List not found")
        return todo_list

    async def create_list(
        self,
        owner: User,
        *,
        list_name: str | None,
        list_id: str | None = None,
        color: int | None = None,
    ) -> TodoList:
        if list_name is None or not list_name.strip():
            raise ValidationError("List name is required")
        list_id = list_id or uuid4().hex
        if await self._repository.get_by_list_id(list_id) is not None:
            raise ConflictError("List ID already exists")

        todo_list = TodoList(
            list_id=list_id,
            list_name=list_name.strip(),
            color=color,
            created_by=owner.id,
        )
        await self._repository.add(todo_list)
        await self._user_repository.push_list(owner.id, todo_list.id)
        logger.info("List created", extra={"list_id": list_id, "user_name": owner.user_name})
        return todo_list

    async def update_list(
        self,
        owner: User,
        list_id: str,
        *,
        list_name: str | None = None,
        color: object = _UNSET,
    ) -> TodoList:
        """Rename or recolour a list; ``color`` may be cleared with ``None``."""
        todo_list = await self.get_list(owner, list_id)
        if list_name is not None:
            if not list_name.strip():
                raise ValidationError("List name is required")
            todo_list.list_name = list_name.strip()
        if color is not _UNSET:
            todo_list.color = color  # type: ignore[assignment]
        await self._repository.save(todo_list)
        return todo_list

    async def delete_list(self, owner: User, list_id: str) -> int:
        """Delete a list and every task it owns; return the number of tasks removed.

        The task cascade runs before the list itself is removed and is not
        atomic with it.
        """
        todo_list = await self.get_list(owner, list_id)
        removed = await self._task_repository.delete_for_list(todo_list.id)
        await self._repository.delete(todo_list)
        await self._user_repository.pull_list(owner.id, todo_list.id)
        logger.info(
            "List deleted",
            extra={"list_id": list_id, "user_name": owner.user_name, "tasks_removed": removed},
        )
        return removed
