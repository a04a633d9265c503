from __future__ import annotations

import pytest
from httpx import AsyncClient

from tasklists.app.models import Task, TodoList

from .conftest import SeededAccount

pytestmark = pytest.mark.asyncio


def _tasks_url(account: SeededAccount, list_id: str | None = None) -> str:
    return f"/api/users/{account.user_name}/lists/{list_id or account.todo_list.list_id}/tasks"


async def test_get_tasks(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.get(_tasks_url(account), headers=account.headers)

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, list)
    assert body[0]["taskID"] == "test-task-1"
    assert body[0]["completed"] is False
    assert body[0]["list"] == str(account.todo_list.id)


async def test_get_tasks_for_missing_list(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.get(_tasks_url(account, "nonexistent"), headers=account.headers)

    assert response.status_code == 404
    assert response.json()["message"] == "List not found"


async def test_create_task(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(
        _tasks_url(account),
        headers=account.headers,
        json={"taskName": "New Test Task", "notes": "Test notes", "priority": "Medium"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["taskName"] == "New Test Task"
    assert body["notes"] == "Test notes"
    assert body["priority"] == "Medium"
    assert body["taskID"]

    stored_list = await TodoList.find_one(TodoList.list_id == account.todo_list.list_id)
    assert stored_list is not None
    assert [str(ref) for ref in stored_list.tasks] == [str(account.task.id), body["id"]]


async def test_create_task_with_only_a_name(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(
        _tasks_url(account),
        headers=account.headers,
        json={"taskName": "New Test Task"},
    )

    assert response.status_code == 201
    assert response.json()["priority"] is None


async def test_create_task_requires_name(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(_tasks_url(account), headers=account.headers, json={"notes": "x"})

    assert response.status_code == 400
    assert response.json()["message"] == "Task name is required"


async def test_create_task_with_duplicate_identifier(
    client: AsyncClient,
    account: SeededAccount,
) -> None:
    response = await client.post(
        _tasks_url(account),
        headers=account.headers,
        json={"taskID": "test-task-1", "taskName": "Clone"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Task ID already exists"


async def test_create_task_for_another_user(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(
        f"/api/users/anotheruser/lists/{account.todo_list.list_id}/tasks",
        headers=account.headers,
        json={"taskName": "New Test Task", "notes": "Test notes", "priority": "Medium"},
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Unauthorized to add tasks to this list"


async def test_create_task_in_missing_list(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(
        _tasks_url(account, "fake"),
        headers=account.headers,
        json={"taskName": "New Test Task"},
    )

    assert response.status_code == 404
    assert response.json()["message"] == "List not found"


async def test_create_task_with_invalid_token(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.post(
        _tasks_url(account),
        headers={"Authorization": "Bearer different"},
        json={"taskName": "New Test Task"},
    )

    assert response.status_code == 401
    assert await Task.find(Task.list_ref == account.todo_list.id).count() == 1


async def test_update_task(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.put(
        f"{_tasks_url(account)}/{account.task.task_id}",
        headers=account.headers,
        json={"completed": True},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["completed"] is True
    assert body["taskName"] == "Test Task"


async def test_update_task_clears_notes(client: AsyncClient, account: SeededAccount) -> None:
    url = f"{_tasks_url(account)}/{account.task.task_id}"
    await client.put(url, headers=account.headers, json={"notes": "temporary"})

    response = await client.put(url, headers=account.headers, json={"notes": None})

    assert response.status_code == 200
    assert response.json()["notes"] is None


async def test_update_missing_task(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.put(
        f"{_tasks_url(account)}/nonexistent-task",
        headers=account.headers,
        json={"completed": True},
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found"


async def test_update_task_through_wrong_list(
    client: AsyncClient,
    account: SeededAccount,
) -> None:
    second = await client.post(
        f"/api/users/{account.user_name}/lists",
        headers=account.headers,
        json={"listID": "second-list", "listName": "Second"},
    )
    assert second.status_code == 201

    response = await client.put(
        f"{_tasks_url(account, 'second-list')}/{account.task.task_id}",
        headers=account.headers,
        json={"completed": True},
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found"


async def test_update_task_with_empty_payload(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.put(
        f"{_tasks_url(account)}/{account.task.task_id}",
        headers=account.headers,
        json={},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


async def test_delete_task(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.delete(
        f"{_tasks_url(account)}/{account.task.task_id}",
        headers=account.headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "tasks deleted"
    assert await Task.find_one(Task.task_id == account.task.task_id) is None

    stored_list = await TodoList.find_one(TodoList.list_id == account.todo_list.list_id)
    assert stored_list is not None
    assert stored_list.tasks == []


async def test_delete_missing_task(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.delete(
        f"{_tasks_url(account)}/nonexistent-task",
        headers=account.headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found"


@pytest.mark.parametrize(
    ("method", "suffix", "payload"),
    [
        ("PUT", "/otheruser-task-1", {"completed": True}),
        ("DELETE", "/otheruser-task-1", None),
    ],
)
async def test_cannot_touch_another_users_tasks(
    client: AsyncClient,
    account: SeededAccount,
    other_account: SeededAccount,
    method: str,
    suffix: str,
    payload: dict[str, bool] | None,
) -> None:
    response = await client.request(
        method,
        f"{_tasks_url(other_account)}{suffix}",
        headers=account.headers,
        json=payload,
    )

    assert response.status_code == 403
    stored = await Task.find_one(Task.task_id == other_account.task.task_id)
    assert stored is not None
    assert stored.completed is False


async def test_update_task_rejects_blank_name(client: AsyncClient, account: SeededAccount) -> None:
    response = await client.put(
        f"{_tasks_url(account)}/{account.task.task_id}",
        headers=account.headers,
        json={"taskName": "   "},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Task name is required"
    stored = await Task.find_one(Task.task_id == account.task.task_id)
    assert stored is not None
    assert stored.task_name == "Test Task"
