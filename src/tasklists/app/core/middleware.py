"""Request correlation and access logging."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .context import REQUEST_ID_HEADER, bind_request_id, reset_request_id

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 128


def accept_request_id(raw: str | None) -> str:
    """Reuse a caller-supplied id when it is short and printable, else mint one."""

    candidate = (raw or "").strip()
    if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH and candidate.isprintable():
        return candidate
    return uuid.uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with a correlation id and log how it finished.

    The id is stored on ``request.state`` for the exception handlers, bound
    to the logging context while the request runs and echoed on the response.
    """

    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_HEADER) -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = accept_request_id(request.headers.get(self.header_name))
        request.state.request_id = request_id
        token = bind_request_id(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
        finally:
            reset_request_id(token)
        response.headers[self.header_name] = request_id
        return response


__all__ = ["CorrelationIdMiddleware", "MAX_REQUEST_ID_LENGTH", "accept_request_id"]
