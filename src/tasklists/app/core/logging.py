"""JSON logging for the task list service."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Mapping

from .config import Settings
from .context import UNBOUND, current_context

# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_CONTEXT_ATTRS = ("request_id", "user_name")

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JsonLogFormatter(logging.Formatter):
    """Emit one JSON object per record.

    Fixed fields come first, then the static ``defaults`` (service and
    environment), the request context and finally any ``extra`` values.
    Extras never replace a field that is already present.
    """

    def __init__(self, *, defaults: Mapping[str, Any] | None = None, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self._defaults = dict(defaults or {})

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in self._defaults.items():
            entry.setdefault(key, value)

        entry["request_id"] = getattr(record, "request_id", UNBOUND)
        user_name = getattr(record, "user_name", None)
        if user_name is not None:
            entry["user_name"] = user_name

        for key, value in vars(record).items():
            if key in _STANDARD_RECORD_ATTRS or key in _CONTEXT_ATTRS:
                continue
            entry.setdefault(key, _jsonable(value))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class RequestContextFilter(logging.Filter):
    """Copy the request id and authenticated user onto each record.

    A ``user_name`` passed explicitly through ``extra`` wins over the one
    bound to the request.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        context = current_context()
        record.request_id = context.request_id
        if getattr(record, "user_name", None) is None:
            record.user_name = context.user_name
        return True


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``settings``."""

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    server_loggers = {
        name: {"handlers": ["stdout"], "level": level, "propagate": False}
        for name in _SERVER_LOGGERS
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JsonLogFormatter,
                "defaults": {
                    "service": settings.project_name,
                    "environment": settings.environment,
                },
            }
        },
        "filters": {"request_context": {"()": RequestContextFilter}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "json",
                "filters": ["request_context"],
                "level": level,
            }
        },
        "root": {"handlers": ["stdout"], "level": level},
        "loggers": {
            **server_loggers,
            # pymongo logs every command at DEBUG.
            "pymongo": {"level": max(level, logging.WARNING)},
        },
    }


def configure_logging(settings: Settings) -> None:
    """Route application, uvicorn and warnings output through the JSON handler."""

    logging.captureWarnings(True)
    logging.config.dictConfig(build_logging_config(settings))


__all__ = ["JsonLogFormatter", "RequestContextFilter", "build_logging_config", "configure_logging"]
