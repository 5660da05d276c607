"""
Document CRUD Service - Basic CRUD operations for document lifecycle management.

This service handles core document lifecycle operations:
- Document creation from an uploaded file
- Document retrieval by id
- Partial updates (metadata and/or content replacement)
- Hard deletion

Every operation runs in exactly one transaction; validation and existence
checks happen before anything is written.
"""

from typing import Optional

from fastapi import UploadFile

from app.models.document import DocumentModel
from app.models.schemas import DocumentPatch, DocumentResponse, to_document_response
from .document_base_service import DocumentBaseService, DocumentNotFoundError


class DocumentCrudService(DocumentBaseService):
    """Service for basic document CRUD operations."""

    async def create_document(
        self,
        file: UploadFile,
        category: str,
        filename: str,
        validation_service=None,
    ) -> DocumentResponse:
        """
        Store a new document.

        Args:
            file: Uploaded file
            category: Grouping tag
            filename: Display and download name
            validation_service: Validation service dependency

        Returns:
            Metadata of the stored document

        Raises:
            InvalidFileError: If the file is empty
            DatabaseError: If the store rejects the write
        """
        content, content_type = await validation_service.validate_upload(
            file, filename
        )

        async with self._repository("upload document") as repository:
            doc_model = DocumentModel(file_name=filename, category=category)
            doc_model.replace_content(content, content_type)
            await repository.save(doc_model)

            self.logger.info(
                "Document stored",
                document_id=doc_model.id,
                file_name=filename,
                file_type=content_type,
                category=category,
                file_size=doc_model.file_size,
            )

            return to_document_response(doc_model)

    async def get_document(self, document_id: int) -> DocumentResponse:
        """
        Get document metadata by ID.

        Raises:
            DocumentNotFoundError: If document not found
        """
        async with self._repository("retrieve document") as repository:
            doc_model = await repository.find_by_id(document_id)
            if doc_model is None:
                raise DocumentNotFoundError(document_id)
            return to_document_response(doc_model)

    async def update_document(
        self,
        document_id: int,
        file: Optional[UploadFile] = None,
        category: Optional[str] = None,
        filename: Optional[str] = None,
        validation_service=None,
    ) -> DocumentResponse:
        """
        Apply a partial update.

        Only non-empty values change the document. A non-empty file replaces
        type, content and size together; an empty file is ignored.

        Args:
            document_id: Document ID
            file: Replacement file (optional)
            category: New category (optional)
            filename: New display name (optional)
            validation_service: Validation service dependency

        Returns:
            Metadata of the updated document

        Raises:
            DocumentNotFoundError: If document not found
        """
        content, content_type = await validation_service.read_upload(file, filename)
        patch = DocumentPatch.from_form(
            file_name=filename,
            category=category,
            content=content,
            content_type=content_type,
        )

        async with self._repository("update document") as repository:
            doc_model = await repository.find_by_id(document_id)
            if doc_model is None:
                raise DocumentNotFoundError(document_id)

            patch.apply_to(doc_model)
            await repository.save(doc_model)

            self.logger.info(
                "Document updated",
                document_id=document_id,
                updated_fields=sorted(patch.model_fields_set),
                content_replaced=patch.replaces_content,
            )

            return to_document_response(doc_model)

    async def delete_document(self, document_id: int) -> None:
        """
        Permanently delete a document.

        Existence is checked first, inside the same transaction as the delete.

        Raises:
            DocumentNotFoundError: If document not found
        """
        async with self._repository("delete document") as repository:
            if not await repository.exists_by_id(document_id):
                raise DocumentNotFoundError(document_id)

            await repository.delete_by_id(document_id)

            self.logger.info("Document deleted", document_id=document_id)
