"""Error response schemas for OpenAPI documentation."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized API error response body."""

    code: str = Field(
        ...,
        description="Error code for client-side handling",
        example="DOCUMENT_NOT_FOUND",
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        example="Document not found with id: 42",
    )
    error_id: Optional[str] = Field(
        None,
        description="Unique error ID for support tracking",
        example="ab12cd34",
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional error context and field-specific errors",
    )
    path: Optional[str] = Field(
        None,
        description="Request path that caused the error",
        example="/api/documents/42",
    )


class APIErrorResponse(BaseModel):
    """Wrapper for error responses (matches actual API error format)."""

    error: ErrorResponse = Field(..., description="Error details")
    message: str = Field(
        ...,
        description="Same as error.message, for clients reading a flat message",
    )


class NotFoundErrorResponse(APIErrorResponse):
    """404 Not Found error response."""

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "DOCUMENT_NOT_FOUND",
                    "message": "Document not found with id: 42",
                    "error_id": "ab12cd34",
                    "path": "/api/documents/42",
                },
                "message": "Document not found with id: 42",
            }
        }
    }


class InvalidFileErrorResponse(APIErrorResponse):
    """400 Bad Request error response for unusable uploads."""

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "INVALID_FILE",
                    "message": "File cannot be empty",
                    "error_id": "cd34ef56",
                    "path": "/api/documents/upload",
                },
                "message": "File cannot be empty",
            }
        }
    }


class InternalServerErrorResponse(APIErrorResponse):
    """500 Internal Server Error response."""

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "error_id": "ef56ab78",
                },
                "message": "An unexpected error occurred",
            }
        }
    }
