"""Base repository implementation over beanie documents."""

from __future__ import annotations

from typing import Generic, TypeVar

from beanie import Document, PydanticObjectId

DocumentType = TypeVar("DocumentType", bound=Document)


class BaseRepository(Generic[DocumentType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, document_type: type[DocumentType]) -> None:
        self._document_type = document_type

    async def get(self, document_id: PydanticObjectId) -> DocumentType | None:
        """Retrieve a document by its ObjectId."""
        return await self._document_type.get(document_id)

    async def list(self) -> list[DocumentType]:
        """Return all documents of the repository type."""
        return await self._document_type.find_all().to_list()

    async def add(self, instance: DocumentType) -> DocumentType:
        """Insert a new document."""
        await instance.insert()
        return instance

    async def save(self, instance: DocumentType) -> DocumentType:
        """Persist changes made to an existing document."""
        await instance.save()
        return instance

    async def delete(self, instance: DocumentType) -> None:
        await instance.delete()
