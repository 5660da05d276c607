"""
Document upload endpoints.

This module handles document upload operations, focusing on:
- Multipart file intake with category and display name
- Empty-file rejection
- Error handling and logging
"""

from fastapi import APIRouter, File, Form, UploadFile, Depends

from app.core.exceptions import DatabaseError
from app.models.schemas import DocumentResponse
from app.services.document_service import InvalidFileError
from .common import (
    INVALID_FILE_RESPONSE,
    SERVER_ERROR_RESPONSE,
    get_document_dependencies,
    handle_database_error,
    handle_invalid_file_error,
    log_operation_start,
    log_operation_success,
)

router = APIRouter()


@router.post(
    "/upload",
    response_model=DocumentResponse,
    summary="📤 Upload Document",
    operation_id="uploadDocument",
    description="""Store a new document.

**Form Fields:**
- **file**: Document file (required, must not be empty)
- **category**: Free-form grouping tag
- **filename**: Display and download name

**Example Request:**
```bash
curl -X POST "http://localhost:8080/api/documents/upload" \\
  -F "file=@invoice.pdf" \\
  -F "category=invoices" \\
  -F "filename=invoice-2025-001.pdf"
```

**Response Format:**
```json
{
  "id": 42,
  "fileName": "invoice-2025-001.pdf",
  "fileType": "application/pdf",
  "category": "invoices",
  "fileSize": 1048576,
  "uploadDate": "2025-01-15T10:30:00+00:00"
}
```

**Error Responses:**
- **400 Bad Request**: File is empty
- **422 Unprocessable Entity**: Missing file part""",
    responses={**INVALID_FILE_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def upload_document(
    file: UploadFile = File(..., description="Document file"),
    category: str = Form("", description="Grouping tag"),
    filename: str = Form("", description="Display and download name"),
    deps=Depends(get_document_dependencies),
):
    """Store an uploaded file with its category and display name."""
    document_service = deps["document_service"]

    log_operation_start(
        "Document upload",
        filename=filename,
        category=category,
        part_filename=file.filename,
        content_type=file.content_type,
        file_size=file.size,
    )

    try:
        result = await document_service.upload_document(
            file=file, category=category, filename=filename
        )

        log_operation_success(
            "Document upload",
            document_id=result.id,
            filename=result.file_name,
            file_size=result.file_size,
        )

        return result

    except InvalidFileError as e:
        raise handle_invalid_file_error(e, "document upload", filename=filename)
    except DatabaseError as e:
        raise handle_database_error(e, "document upload", filename=filename)
