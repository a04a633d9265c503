"""Routes handling the tasks inside a list."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import CurrentUserDependency, ensure_owner
from ...schemas import MessageResponse, TaskCreate, TaskRead, TaskUpdate
from ...services import ListService, TaskService

router = APIRouter(prefix="/users/{user_name}/lists/{list_id}/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskRead], summary="List the tasks of a list")
async def list_tasks(
    user_name: str,
    list_id: str,
    current_user: CurrentUserDependency,
) -> list[TaskRead]:
    ensure_owner(current_user, user_name, "Unauthorized to view tasks in this list")
    todo_list = await ListService().get_list(current_user, list_id)
    tasks = await TaskService().list_tasks(todo_list)
    return [TaskRead.from_document(task) for task in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task in a list",
)
async def create_task(
    user_name: str,
    list_id: str,
    payload: TaskCreate,
    current_user: CurrentUserDependency,
) -> TaskRead:
    ensure_owner(current_user, user_name, "Unauthorized to add tasks to this list")
    todo_list = await ListService().get_list(current_user, list_id)
    task = await TaskService().create_task(
        todo_list,
        task_id=payload.task_id,
        task_name=payload.task_name,
        notes=payload.notes,
        priority=payload.priority,
        completed=payload.completed,
    )
    return TaskRead.from_document(task)


@router.put("/{task_id}", response_model=TaskRead, summary="Update a task")
async def update_task(
    user_name: str,
    list_id: str,
    task_id: str,
    payload: TaskUpdate,
    current_user: CurrentUserDependency,
) -> TaskRead:
    ensure_owner(current_user, user_name, "Unauthorized to update tasks in this list")
    todo_list = await ListService().get_list(current_user, list_id)
    updates = payload.model_dump(include=payload.model_fields_set)
    task = await TaskService().update_task(todo_list, task_id, **updates)
    return TaskRead.from_document(task)


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
async def delete_task(
    user_name: str,
    list_id: str,
    task_id: str,
    current_user: CurrentUserDependency,
) -> MessageResponse:
    ensure_owner(current_user, user_name, "Unauthorized to delete tasks in this list")
    todo_list = await ListService().get_list(current_user, list_id)
    await TaskService().delete_task(todo_list, task_id)
    return MessageResponse(message="tasks deleted")
