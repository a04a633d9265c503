"""Domain service layer package."""

from __future__ import annotations

from .auth import AuthResult, AuthService
from .lists import ListService
from .tasks import TaskService
from .users import UserService

__all__ = ["AuthResult", "AuthService", "ListService", "TaskService", "UserService"]
