"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging
from uuid import uuid4

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import Task, TaskPriority, TodoList
from ..repositories import ListRepository, TaskRepository

logger = logging.getLogger(__name__)

_UNSET = object()


class TaskService:
    """High-level business orchestration for ``Task`` documents."""

    def __init__(self) -> None:
        self._repository = TaskRepository()
        self._list_repository = ListRepository()

    @property
    def repository(self) -> TaskRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def list_tasks(self, todo_list: TodoList) -> list[Task]:
        """Return the list's tasks in the order recorded on the list."""
        tasks = await self._repository.list_for_list(todo_list.id)
        position = {ref: index for index, ref in enumerate(todo_list.tasks)}
        return sorted(tasks, key=lambda item: position.get(item.id, len(position)))

    async def get_task(self, todo_list: TodoList, task_id: str) -> Task:
        task = await self._repository.get_for_list(task_id, todo_list.id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def create_task(
        self,
        todo_list: TodoList,
        *,
        task_name: str | None,
        task_id: str | None = None,
        notes: str | None = None,
        priority: TaskPriority | None = None,
        completed: bool = False,
    ) -> Task:
        """Create a task inside ``todo_list`` and record it on the list."""
        if task_name is None or not task_name.strip():
            raise ValidationError("Task name is required")
        task_id = task_id or uuid4().hex
        if await self._repository.get_by_task_id(task_id) is not None:
            raise ConflictError("Task ID already exists")

        task = Task(
            task_id=task_id,
            task_name=task_name.strip(),
            notes=notes,
            priority=priority,
            completed=completed,
            list_ref=todo_list.id,
        )
        await self._repository.add(task)
        await self._list_repository.push_task(todo_list.id, task.id)
        logger.info("Task created", extra={"task_id": task_id, "list_id": todo_list.list_id})
        return task

    async def update_task(
        self,
        todo_list: TodoList,
        task_id: str,
        *,
        task_name: str | None = None,
        notes: object = _UNSET,
        priority: object = _UNSET,
        completed: bool | None = None,
    ) -> Task:
        """Apply updates to a task; ``notes`` and ``priority`` may be cleared with ``None``."""
        task = await self.get_task(todo_list, task_id)
        if task_name is not None:
            if not task_name.strip():
                raise ValidationError("Task name is required")
            task.task_name = task_name.strip()
        if notes is not _UNSET:
            task.notes = notes  # type: ignore[assignment]
        if priority is not _UNSET:
            task.priority = priority  # type: ignore[assignment]
        if completed is not None:
            task.completed = completed
        await self._repository.save(task)
        return task

    async def delete_task(self, todo_list: TodoList, task_id: str) -> None:
        task = await self.get_task(todo_list, task_id)
        await self._repository.delete(task)
        await self._list_repository.pull_task(todo_list.id, task.id)
        logger.info("Task deleted", extra={"task_id": task_id, "list_id": todo_list.list_id})
