"""
Document Query Service - listing and filtering operations.

This service handles multi-document reads:
- Listing every stored document
- Exact-match filtering by category

Results are metadata only; file content is never loaded here.
"""

from typing import List

from app.models.schemas import DocumentResponse, to_document_response
from .document_base_service import DocumentBaseService


class DocumentQueryService(DocumentBaseService):
    """Service for document listing queries."""

    async def list_documents(self) -> List[DocumentResponse]:
        """List all documents, ordered by id."""
        async with self._repository("list documents") as repository:
            models = await repository.find_all()
            documents = [to_document_response(model) for model in models]

        self.logger.debug("Documents listed", count=len(documents))
        return documents

    async def list_documents_by_category(self, category: str) -> List[DocumentResponse]:
        """
        List documents whose category equals ``category`` (case-sensitive).

        Returns an empty list when nothing matches.
        """
        async with self._repository("list documents by category") as repository:
            models = await repository.find_by_category(category)
            documents = [to_document_response(model) for model in models]

        self.logger.debug(
            "Documents listed by category", category=category, count=len(documents)
        )
        return documents
