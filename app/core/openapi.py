"""OpenAPI schema customization.

Provides custom OpenAPI schema with:
- Tag descriptions
- Example document payloads
"""

from typing import Dict, Any
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi


def create_custom_openapi(app: FastAPI) -> Dict[str, Any]:
    """Create custom OpenAPI schema with tag descriptions and examples.

    Args:
        app: FastAPI application instance

    Returns:
        Customized OpenAPI schema dictionary
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=get_tag_descriptions(),
    )

    openapi_schema.setdefault("components", {})["examples"] = get_openapi_examples()

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def get_tag_descriptions() -> list:
    """Get OpenAPI tag descriptions."""
    return [
        {
            "name": "Documents",
            "description": """Document upload, storage, and retrieval.

**Storage:** file bytes and metadata live in one relational row
**Metadata responses** never include the file content; use the download endpoint

**Key Operations:** upload, list, filter by category, get, download, update, delete""",
        },
        {
            "name": "Health",
            "description": """API health checks and status monitoring.

**Endpoints:**
- `/health` - Basic health check
- `/status` - Detailed service status
- `/ready` - Readiness probe
- `/live` - Liveness probe""",
        },
    ]


def get_openapi_examples() -> Dict[str, Any]:
    """Get OpenAPI example responses."""
    return {
        "DocumentResponse": {
            "summary": "Stored document metadata",
            "value": {
                "id": 42,
                "fileName": "invoice-2025-001.pdf",
                "fileType": "application/pdf",
                "category": "invoices",
                "fileSize": 1048576,
                "uploadDate": "2025-01-15T10:30:00+00:00",
            },
        },
        "DocumentNotFound": {
            "summary": "Unknown document id",
            "value": {
                "error": {
                    "code": "DOCUMENT_NOT_FOUND",
                    "message": "Document not found with id: 42",
                    "error_id": "ab12cd34",
                    "path": "/api/documents/42",
                },
                "message": "Document not found with id: 42",
            },
        },
    }
