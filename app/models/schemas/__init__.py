"""Pydantic schemas for API requests and responses.

- document.py: Document metadata, download and patch schemas
- errors.py: Error response schemas

All schemas are re-exported here.
Import from this module: `from app.models.schemas import DocumentResponse`
"""

# Document schemas
from app.models.schemas.document import (
    DocumentResponse,
    DocumentDownload,
    DocumentPatch,
    to_document_response,
)

# Error schemas
from app.models.schemas.errors import (
    ErrorResponse,
    APIErrorResponse,
    NotFoundErrorResponse,
    InvalidFileErrorResponse,
    InternalServerErrorResponse,
)

__all__ = [
    "DocumentResponse",
    "DocumentDownload",
    "DocumentPatch",
    "to_document_response",
    "ErrorResponse",
    "APIErrorResponse",
    "NotFoundErrorResponse",
    "InvalidFileErrorResponse",
    "InternalServerErrorResponse",
]
