"""
Shared utilities and dependencies for document API endpoints.

This module provides common functionality used across different document router modules,
following the DRY (Don't Repeat Yourself) principle.
"""

from typing import Dict, Any
from fastapi import HTTPException, status

from app.core.exceptions import DatabaseError
from app.core.logging import get_api_logger
from app.models.schemas import (
    InternalServerErrorResponse,
    InvalidFileErrorResponse,
    NotFoundErrorResponse,
)
from app.services.document_service import (
    document_service,
    DocumentNotFoundError,
    InvalidFileError,
)

# Shared logger instance
logger = get_api_logger()

# OpenAPI error response declarations shared by the endpoint modules
NOT_FOUND_RESPONSE = {
    404: {"model": NotFoundErrorResponse, "description": "Document not found"}
}
INVALID_FILE_RESPONSE = {
    400: {"model": InvalidFileErrorResponse, "description": "Empty file"}
}
SERVER_ERROR_RESPONSE = {
    500: {"model": InternalServerErrorResponse, "description": "Storage error"}
}


def get_document_dependencies() -> Dict[str, Any]:
    """Get common dependencies for document endpoints."""
    return {"document_service": document_service, "logger": logger}


def _error_detail(e, message: str = None) -> Dict[str, str]:
    return {"code": e.error_code, "message": message or e.message}


def handle_document_not_found_error(
    e: DocumentNotFoundError, operation: str, **context
) -> HTTPException:
    """Handle DocumentNotFoundError consistently across endpoints."""
    logger.warning(f"Document not found for {operation}", error=str(e), **context)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=_error_detail(e)
    )


def handle_invalid_file_error(
    e: InvalidFileError, operation: str, **context
) -> HTTPException:
    """Handle InvalidFileError consistently across endpoints."""
    logger.warning(f"Invalid file rejected for {operation}", error=str(e), **context)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=_error_detail(e)
    )


def handle_database_error(e: DatabaseError, operation: str, **context) -> HTTPException:
    """Handle store failures consistently across endpoints."""
    logger.error(
        f"Database error during {operation}",
        error=str(e),
        details=e.details,
        **context,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=_error_detail(e, f"An error occurred while processing {operation}"),
    )


def log_operation_start(operation: str, **context) -> None:
    """Log the start of an operation consistently."""
    logger.info(f"{operation} started", **context)


def log_operation_success(operation: str, **context) -> None:
    """Log successful operation completion consistently."""
    logger.info(f"{operation} completed successfully", **context)
