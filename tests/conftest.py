from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from tasklists.app.core.config import get_settings
from tasklists.app.core.security import generate_access_token
from tasklists.app.db import close_document_store, init_document_store
from tasklists.app.main import create_app
from tasklists.app.models import Task, TodoList, User
from tasklists.app.services import ListService, TaskService, UserService

TEST_PASSWORD = "testpassword"


@dataclass(slots=True)
class SeededAccount:
    user: User
    token: str
    todo_list: TodoList
    task: Task

    @property
    def user_name(self) -> str:
        return self.user.user_name

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest_asyncio.fixture
async def document_store() -> AsyncIterator[None]:
    get_settings.cache_clear()
    settings = get_settings()
    settings.mongo_database = "tasklists_test"
    await init_document_store(client=AsyncMongoMockClient(), force=True)
    try:
        yield
    finally:
        await close_document_store()
        get_settings.cache_clear()


@pytest_asyncio.fixture
async def app(document_store: None) -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


async def create_account(
    user_name: str,
    *,
    email: str | None = None,
    list_id: str | None = None,
    task_id: str | None = None,
) -> SeededAccount:
    """Persist a user owning one list with one task and sign a token for them."""

    user = await UserService().create_user(
        user_name=user_name,
        email=email or f"{user_name}@example.com",
        first_name="Test",
        last_name="User",
        password=TEST_PASSWORD,
    )
    todo_list = await ListService().create_list(
        user,
        list_id=list_id or f"{user_name}-list-1",
        list_name="Test List",
    )
    task = await TaskService().create_task(
        todo_list,
        task_id=task_id or f"{user_name}-task-1",
        task_name="Test Task",
    )
    token = generate_access_token(user.user_name, settings=get_settings()).token
    refreshed_user = await UserService().get_user_by_user_name(user_name)
    refreshed_list = await ListService().repository.get(todo_list.id)
    assert refreshed_user is not None and refreshed_list is not None
    return SeededAccount(user=refreshed_user, token=token, todo_list=refreshed_list, task=task)


@pytest_asyncio.fixture
async def account(document_store: None) -> SeededAccount:
    return await create_account(
        "testuser",
        email="test@example.com",
        list_id="test-list-1",
        task_id="test-task-1",
    )


@pytest_asyncio.fixture
async def other_account(document_store: None) -> SeededAccount:
    return await create_account("otheruser")
