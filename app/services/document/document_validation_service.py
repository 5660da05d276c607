"""
Document Validation Service - upload checks and content type resolution.

This service handles the validation aspects of document management:
- Rejecting empty uploads
- Reading upload content
- Resolving the MIME type recorded for stored content
"""

import mimetypes
from typing import Optional, Tuple
from fastapi import UploadFile

from .document_base_service import DocumentBaseService, InvalidFileError

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class DocumentValidationService(DocumentBaseService):
    """Service for document upload validation."""

    def _ensure_not_empty(self, content: bytes, filename: Optional[str]) -> None:
        """
        Reject zero-length uploads.

        Raises:
            InvalidFileError: If the file has no content
        """
        if not content:
            self.logger.warning("Rejected empty file upload", filename=filename)
            raise InvalidFileError("File cannot be empty")

    def _resolve_content_type(
        self, declared: Optional[str], filename: Optional[str]
    ) -> str:
        """
        Determine the MIME type to record for uploaded content.

        The part's declared content type wins; otherwise it is guessed from
        the filename, falling back to application/octet-stream.
        """
        if declared and declared.strip():
            return declared.strip()
        if filename:
            guessed, _ = mimetypes.guess_type(filename)
            if guessed:
                return guessed
        return DEFAULT_CONTENT_TYPE

    async def read_upload(
        self, file: Optional[UploadFile], fallback_filename: Optional[str] = None
    ) -> Tuple[bytes, str]:
        """
        Read an uploaded file.

        Args:
            file: Uploaded file (None when the request had no file part)
            fallback_filename: Name used for type guessing if the part has none

        Returns:
            Tuple of (content, content_type); content is b"" for a missing file
        """
        if file is None:
            return b"", DEFAULT_CONTENT_TYPE

        content = await file.read()
        content_type = self._resolve_content_type(
            file.content_type, file.filename or fallback_filename
        )
        return content, content_type

    async def validate_upload(
        self, file: Optional[UploadFile], filename: Optional[str] = None
    ) -> Tuple[bytes, str]:
        """
        Read and validate a file for a new document.

        Raises:
            InvalidFileError: If the file is missing or empty
        """
        content, content_type = await self.read_upload(file, filename)
        self._ensure_not_empty(content, filename)
        return content, content_type
