"""Per-request state shared by the middleware, the auth dependency and logging.

A request starts with only its correlation id bound. Once the bearer token
resolves, the caller's user name is added so log lines emitted by the
services can be attributed without threading the user through every call.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass, replace

REQUEST_ID_HEADER = "X-Request-ID"
UNBOUND = "-"


@dataclass(frozen=True, slots=True)
class RequestContext:
    request_id: str = UNBOUND
    user_name: str | None = None


_current: ContextVar[RequestContext] = ContextVar("tasklists_request", default=RequestContext())


def current_context() -> RequestContext:
    return _current.get()


def get_request_id() -> str:
    return _current.get().request_id


def bind_request_id(request_id: str) -> Token[RequestContext]:
    """Open a fresh context for ``request_id``; undo it with ``reset_request_id``."""

    return _current.set(RequestContext(request_id=request_id))


def bind_user_name(user_name: str) -> None:
    """Attach the authenticated user to the context of the running request."""

    _current.set(replace(_current.get(), user_name=user_name))


def reset_request_id(token: Token[RequestContext]) -> None:
    _current.reset(token)


__all__ = [
    "REQUEST_ID_HEADER",
    "UNBOUND",
    "RequestContext",
    "bind_request_id",
    "bind_user_name",
    "current_context",
    "get_request_id",
    "reset_request_id",
]
