"""Document models for users, lists and tasks."""

from __future__ import annotations

from .common import utcnow
from .task import Task, TaskPriority
from .todo_list import TodoList
from .user import User

DOCUMENT_MODELS = [User, TodoList, Task]

__all__ = [
    "DOCUMENT_MODELS",
    "Task",
    "TaskPriority",
    "TodoList",
    "User",
    "utcnow",
]
