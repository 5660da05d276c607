"""
Document services package.

Each service has a single responsibility:
- document_base_service: Shared logging, transactions and exception classes
- document_repository: Row operations on the documents table
- document_validation_service: Empty-file checks and MIME type resolution
- document_crud_service: Create, read, update, delete
- document_query_service: Listing and category filtering
- document_download_service: Combined metadata + content reads
- document_service: Orchestration facade (main interface)
"""

from .document_service import DocumentService, document_service
from .document_base_service import DocumentNotFoundError, InvalidFileError

__all__ = [
    "DocumentService",
    "document_service",
    "DocumentNotFoundError",
    "InvalidFileError",
]
