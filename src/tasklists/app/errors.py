"""Application errors and the JSON error envelope handlers."""

from __future__ import annotations

import logging
from contextvars import Token
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import (
    REQUEST_ID_HEADER,
    RequestContext,
    bind_request_id,
    get_request_id,
    reset_request_id,
)
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for errors surfaced to API clients."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "application_error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        self.headers = dict(headers) if headers else None


class ValidationError(ApplicationError):
    """Missing or malformed request fields."""

    def __init__(self, message: str = "Validation failed.", *, details: Any | None = None) -> None:
        super().__init__(
            message,
            code="validation_error",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class AuthError(ApplicationError):
    """Bad credentials or a missing, malformed or expired token."""

    def __init__(self, message: str = "Authentication required.", *, details: Any | None = None) -> None:
        super().__init__(
            message,
            code="unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(ApplicationError):
    """The authenticated user does not own the addressed resource."""

    def __init__(self, message: str = "Not enough permissions.", *, details: Any | None = None) -> None:
        super().__init__(
            message,
            code="forbidden",
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
        )


class ConflictError(ApplicationError):
    """A unique field already holds the submitted value."""

    def __init__(self, message: str = "Resource already exists", *, details: Any | None = None) -> None:
        super().__init__(
            message,
            code="conflict",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundError(ApplicationError):
    """The addressed user, list or task does not exist."""

    def __init__(self, message: str = "Resource not found.", *, details: Any | None = None) -> None:
        super().__init__(
            message,
            code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _bind_request_context(request: Request) -> Token[RequestContext] | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id or get_request_id() == request_id:
        return None
    return bind_request_id(request_id)


def _reset_request_context(token: Token[RequestContext] | None) -> None:
    if token is not None:
        reset_request_id(token)


def _merge_details_with_request(request: Request, details: Any | None) -> Any | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return details
    if details is None:
        return {"request_id": request_id}
    if isinstance(details, dict):
        return {**details, "request_id": details.get("request_id", request_id)}
    return {"request_id": request_id, "detail": details}


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        code=code,
        message=message,
        details=_merge_details_with_request(request, details),
    )
    response = JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_message(status_code: int, detail: Any) -> str:
    if isinstance(detail, str):
        return detail
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.warning(
                exc.message,
                extra={"code": exc.code, "status_code": exc.status_code, "path": request.url.path},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=exc.code,
                message=exc.message,
                details=exc.details,
                headers=exc.headers,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        errors = jsonable_encoder(exc.errors())
        try:
            logger.warning("Request validation failed", extra={"errors": errors})
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                code="validation_error",
                message="Request validation failed.",
                details={"errors": errors},
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(DuplicateKeyError)
    async def _handle_duplicate_key(
        request: Request,
        exc: DuplicateKeyError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.warning("Duplicate key rejected by the document store", extra={"error": str(exc)})
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                code="conflict",
                message="Resource already exists",
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            code = _HTTP_STATUS_CODE_MAP.get(exc.status_code, "http_error")
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "HTTP exception raised",
                extra={"code": code, "status_code": exc.status_code, "path": request.url.path},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=code,
                message=_http_exception_message(exc.status_code, exc.detail),
                headers=exc.headers or None,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.exception("Unhandled application error.")
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code="server_error",
                message="Internal server error.",
            )
        finally:
            _reset_request_context(token)


__all__ = [
    "ApplicationError",
    "AuthError",
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
]
