"""MongoDB client lifecycle and beanie initialisation."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import get_settings
from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_database: AsyncIOMotorDatabase | None = None
_initialized = False
_lock = asyncio.Lock()


def set_document_client(client: AsyncIOMotorClient | None) -> None:
    """Inject a custom motor client instance (primarily for tests)."""

    global _client, _database, _initialized
    _client = client
    _database = None
    _initialized = False


async def init_document_store(*, client: AsyncIOMotorClient | None = None, force: bool = False) -> None:
    """Connect to MongoDB and register the document models with beanie.

    Index creation for the unique ``user_name``, ``email``, ``list_id`` and
    ``task_id`` fields happens here.
    """

    global _client, _database, _initialized

    async with _lock:
        if client is not None:
            set_document_client(client)

        if _initialized and not force:
            return

        settings = get_settings()
        if _client is None:
            _client = AsyncIOMotorClient(settings.mongo_url, tz_aware=True, uuidRepresentation="standard")
        _database = _client[settings.mongo_database]

        await init_beanie(database=_database, document_models=DOCUMENT_MODELS)
        _initialized = True
        logger.info("Document store initialised", extra={"database": settings.mongo_database})


async def close_document_store() -> None:
    """Dispose the MongoDB client."""

    global _client, _database, _initialized
    client = _client
    if client is not None:
        client.close()
    _client = None
    _database = None
    _initialized = False


def get_database() -> AsyncIOMotorDatabase:
    """Return the initialised database handle."""

    if _database is None:
        raise RuntimeError("Document store has not been initialised.")
    return _database


__all__ = [
    "close_document_store",
    "get_database",
    "init_document_store",
    "set_document_client",
]
