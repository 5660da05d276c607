"""
Document Download Service - file content access.

Metadata and bytes are read with one query in one transaction, so the
headers built from the metadata always describe the bytes being sent.
"""

from app.models.schemas import DocumentDownload, to_document_response
from .document_base_service import DocumentBaseService, DocumentNotFoundError


class DocumentDownloadService(DocumentBaseService):
    """Service for document download operations."""

    async def download_document(self, document_id: int) -> DocumentDownload:
        """
        Fetch a document's content together with its metadata.

        Args:
            document_id: Document ID

        Returns:
            Metadata and raw content of the document

        Raises:
            DocumentNotFoundError: If document not found
        """
        async with self._repository("download document") as repository:
            doc_model = await repository.find_by_id(document_id, include_content=True)
            if doc_model is None:
                raise DocumentNotFoundError(document_id)

            download = DocumentDownload(
                document=to_document_response(doc_model),
                content=doc_model.file_data,
            )

        self.logger.info(
            "Document content served",
            document_id=document_id,
            file_name=download.document.file_name,
            file_size=len(download.content),
        )
        return download
