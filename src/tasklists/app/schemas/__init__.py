"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, TokenPayload
from .system import ErrorResponse, HealthCheckResponse, MessageResponse, RootResponse
from .task import TaskCreate, TaskRead, TaskUpdate
from .todo_list import ListCreate, ListRead, ListUpdate
from .user import UserPublic

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "ListCreate",
    "ListRead",
    "ListUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "RootResponse",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "TokenPayload",
    "UserPublic",
]
