"""Routes handling a user's lists."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import CurrentUserDependency, ensure_owner
from ...schemas import ListCreate, ListRead, ListUpdate, MessageResponse
from ...services import ListService

router = APIRouter(prefix="/users/{user_name}/lists", tags=["lists"])


@router.get("", response_model=list[ListRead], summary="List the user's lists")
async def list_lists(user_name: str, current_user: CurrentUserDependency) -> list[ListRead]:
    ensure_owner(current_user, user_name, "Unauthorized to view these lists")
    lists = await ListService().list_lists(current_user)
    return [ListRead.from_document(item) for item in lists]


@router.post(
    "",
    response_model=ListRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new list",
)
async def create_list(
    user_name: str,
    payload: ListCreate,
    current_user: CurrentUserDependency,
) -> ListRead:
    ensure_owner(current_user, user_name, "Unauthorized to create lists for this user")
    todo_list = await ListService().create_list(
        current_user,
        list_id=payload.list_id,
        list_name=payload.list_name,
        color=payload.color,
    )
    return ListRead.from_document(todo_list)


@router.put("/{list_id}", response_model=ListRead, summary="Update a list")
async def update_list(
    user_name: str,
    list_id: str,
    payload: ListUpdate,
    current_user: CurrentUserDependency,
) -> ListRead:
    ensure_owner(current_user, user_name, "Unauthorized to update this list")
    updates = payload.model_dump(include=payload.model_fields_set)
    todo_list = await ListService().update_list(current_user, list_id, **updates)
    return ListRead.from_document(todo_list)


@router.delete("/{list_id}", response_model=MessageResponse, summary="Delete a list and its tasks")
async def delete_list(
    user_name: str,
    list_id: str,
    current_user: CurrentUserDependency,
) -> MessageResponse:
    ensure_owner(current_user, user_name, "Unauthorized to delete this list")
    await ListService().delete_list(current_user, list_id)
    return MessageResponse(message="List and associated tasks deleted")
