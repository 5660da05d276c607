"""
Document Service - Main orchestration facade for document operations.

This service acts as the single entry point used by the API layer,
composing specialized services:

- DocumentValidationService: Empty-file checks and MIME type resolution
- DocumentCrudService: Create, read, update, delete operations
- DocumentQueryService: Listing and category filtering
- DocumentDownloadService: Combined metadata + content reads
"""

from typing import List, Optional
from fastapi import UploadFile

from app.models.schemas import DocumentDownload, DocumentResponse

# Import specialized services
from .document_base_service import DocumentBaseService
from .document_validation_service import DocumentValidationService
from .document_crud_service import DocumentCrudService
from .document_query_service import DocumentQueryService
from .document_download_service import DocumentDownloadService


class DocumentService(DocumentBaseService):
    """
    Main document service implementing facade pattern.

    Delegates every operation to the specialized service that owns it.
    """

    def __init__(self):
        """Initialize the orchestration service with all specialized services."""
        super().__init__()

        self.validation_service = DocumentValidationService()
        self.crud_service = DocumentCrudService()
        self.query_service = DocumentQueryService()
        self.download_service = DocumentDownloadService()

    # ========================================
    # DELEGATED CRUD METHODS
    # ========================================

    async def upload_document(
        self, file: UploadFile, category: str, filename: str
    ) -> DocumentResponse:
        """Delegate to CRUD service."""
        return await self.crud_service.create_document(
            file=file,
            category=category,
            filename=filename,
            validation_service=self.validation_service,
        )

    async def get_document(self, document_id: int) -> DocumentResponse:
        """Delegate to CRUD service."""
        return await self.crud_service.get_document(document_id)

    async def update_document(
        self,
        document_id: int,
        file: Optional[UploadFile] = None,
        category: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> DocumentResponse:
        """Delegate to CRUD service."""
        return await self.crud_service.update_document(
            document_id=document_id,
            file=file,
            category=category,
            filename=filename,
            validation_service=self.validation_service,
        )

    async def delete_document(self, document_id: int) -> None:
        """Delegate to CRUD service."""
        await self.crud_service.delete_document(document_id)

    # ========================================
    # DELEGATED QUERY METHODS
    # ========================================

    async def list_documents(self) -> List[DocumentResponse]:
        """Delegate to query service."""
        return await self.query_service.list_documents()

    async def list_documents_by_category(self, category: str) -> List[DocumentResponse]:
        """Delegate to query service."""
        return await self.query_service.list_documents_by_category(category)

    # ========================================
    # DELEGATED DOWNLOAD METHODS
    # ========================================

    async def download_document(self, document_id: int) -> DocumentDownload:
        """Delegate to download service."""
        return await self.download_service.download_document(document_id)


# Global service instance
document_service = DocumentService()
