"""Repositories encapsulating document store queries."""

from __future__ import annotations

from .lists import ListRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["ListRepository", "TaskRepository", "UserRepository"]
