"""Seed script for populating development data."""

from __future__ import annotations

import asyncio

from ..core.config import get_settings
from ..core.logging import configure_logging
from ..models import TaskPriority, User
from ..services import ListService, TaskService, UserService
from .connection import close_document_store, init_document_store

DEMO_USER_NAME = "demo"


async def seed() -> User:
    """Create a demo user with one list and a few tasks unless it already exists."""

    user_service = UserService()
    user = await user_service.get_user_by_user_name(DEMO_USER_NAME)
    if user is not None:
        return user

    user = await user_service.create_user(
        user_name=DEMO_USER_NAME,
        email="demo@example.com",
        first_name="Demo",
        last_name="User",
        password="demo-password",
    )
    todo_list = await ListService().create_list(
        user,
        list_id="demo-getting-started",
        list_name="Getting started",
        color=1,
    )
    task_service = TaskService()
    await task_service.create_task(
        todo_list,
        task_id="demo-create-list",
        task_name="Create your first list",
        priority=TaskPriority.HIGH,
    )
    await task_service.create_task(
        todo_list,
        task_id="demo-complete-task",
        task_name="Tick off a task",
        notes="Mark this task as completed from the task view.",
        priority=TaskPriority.MEDIUM,
    )
    return user


async def _run() -> None:
    await init_document_store()
    try:
        await seed()
    finally:
        await close_document_store()


def main() -> None:
    """Entry-point hook for ``python -m`` execution."""
    configure_logging(get_settings())
    asyncio.run(_run())


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
