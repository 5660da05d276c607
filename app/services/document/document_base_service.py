"""
Document Base Service - Common utilities and shared functionality.

This service provides the foundation for all document services with:
- Document exception classes
- Shared logging
- Database session access
- Store failure translation
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError

from app.core.db_client import db
from app.core.exceptions import DocumentStorageError, DatabaseError
from app.core.logging import get_service_logger
from .document_repository import DocumentRepository


# Exception classes
class DocumentNotFoundError(DocumentStorageError):
    """No document exists with the requested id."""

    def __init__(self, document_id: int):
        super().__init__(
            f"Document not found with id: {document_id}",
            "DOCUMENT_NOT_FOUND",
            {"document_id": document_id},
        )
        self.document_id = document_id


class InvalidFileError(DocumentStorageError):
    """Uploaded file is present but unusable (empty)."""

    def __init__(self, message: str = "File cannot be empty"):
        super().__init__(message, "INVALID_FILE")


class DocumentBaseService:
    """Base service with common functionality shared across all document services."""

    def __init__(self):
        """Initialize base service with common configuration."""
        self.logger = get_service_logger("document")

    @property
    def db(self):
        """Get database manager for session access."""
        return db

    @asynccontextmanager
    async def _repository(self, operation: str) -> AsyncGenerator[DocumentRepository, None]:
        """
        Open one transactional unit and hand out a repository bound to it.

        Store failures are logged and re-raised as DatabaseError; the
        session has already rolled back by then.
        """
        try:
            async with self.db.session() as session:
                yield DocumentRepository(session)
        except SQLAlchemyError as e:
            self.logger.error(
                f"Database error during {operation}",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError(
                f"Failed to {operation}", {"error_type": type(e).__name__}
            ) from e
