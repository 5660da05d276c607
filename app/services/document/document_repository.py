"""
Document Repository - row operations for the documents table.

Thin wrapper around one AsyncSession. It performs no business validation;
existence checks and empty-file rules live in the services.
"""

from typing import Optional, Sequence

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer

from app.models.document import DocumentModel

# Largest value a signed 64-bit id column can hold
MAX_DOCUMENT_ID = 2**63 - 1


def _is_storable_id(document_id: int) -> bool:
    return 1 <= document_id <= MAX_DOCUMENT_ID


class DocumentRepository:
    """CRUD and category lookup against the documents table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, document: DocumentModel) -> DocumentModel:
        """Persist a new or modified document; the store assigns the id on flush."""
        self.session.add(document)
        await self.session.flush()
        return document

    async def find_all(self) -> Sequence[DocumentModel]:
        stmt = select(DocumentModel).order_by(DocumentModel.id)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def find_by_category(self, category: str) -> Sequence[DocumentModel]:
        """Documents whose category equals ``category`` exactly."""
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.category == category)
            .order_by(DocumentModel.id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def find_by_id(
        self, document_id: int, include_content: bool = False
    ) -> Optional[DocumentModel]:
        """
        Look up one document.

        Args:
            document_id: Document ID
            include_content: Also load ``file_data`` in the same query

        Returns:
            The document, or None when no row has that id (ids outside
            the column range never match)
        """
        if not _is_storable_id(document_id):
            return None
        stmt = select(DocumentModel).where(DocumentModel.id == document_id)
        if include_content:
            stmt = stmt.options(undefer(DocumentModel.file_data))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_id(self, document_id: int) -> bool:
        if not _is_storable_id(document_id):
            return False
        stmt = select(exists().where(DocumentModel.id == document_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def delete_by_id(self, document_id: int) -> None:
        await self.session.execute(
            delete(DocumentModel).where(DocumentModel.id == document_id)
        )

