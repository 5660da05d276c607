"""
Document Service - import shortcut for the document services package.

Re-exports the facade instance and the exception classes so callers can
write `from app.services.document_service import document_service`.
"""

from .document.document_service import document_service, DocumentService
from .document.document_base_service import (
    DocumentNotFoundError,
    InvalidFileError,
)

__all__ = [
    "document_service",
    "DocumentService",
    "DocumentNotFoundError",
    "InvalidFileError",
]
