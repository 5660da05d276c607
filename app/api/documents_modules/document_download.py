"""
Document download endpoints.

This module handles document download operations, focusing on:
- Serving stored bytes with the recorded MIME type
- Attachment headers carrying the stored file name
- Proper error handling for missing documents
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.exceptions import DatabaseError
from app.services.document_service import DocumentNotFoundError
from .common import (
    NOT_FOUND_RESPONSE,
    SERVER_ERROR_RESPONSE,
    get_document_dependencies,
    handle_database_error,
    handle_document_not_found_error,
    log_operation_start,
    log_operation_success,
)

router = APIRouter()


def build_content_disposition(filename: str) -> str:
    """
    Build an attachment Content-Disposition header value.

    Header values must be latin-1; names outside it get an ASCII
    ``filename`` fallback plus an RFC 5987 ``filename*`` parameter.
    """
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("latin-1")
    except UnicodeEncodeError:
        fallback = escaped.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return (
            f'attachment; filename="{fallback}"; '
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    return f'attachment; filename="{escaped}"'


@router.get(
    "/download/{document_id}",
    summary="⬇️ Download Document",
    operation_id="downloadDocument",
    description="""Download the stored bytes of a document.

**Path Parameters:**
- `document_id`: Document identifier

**Response:**
- Body: the exact bytes that were uploaded
- `Content-Type`: MIME type recorded at upload or last replacement
- `Content-Disposition`: `attachment; filename="<fileName>"`

**Example Request:**
```bash
curl -OJ "http://localhost:8080/api/documents/download/42"
```""",
    response_class=Response,
    responses={
        200: {
            "description": "Raw document content",
            "content": {"application/octet-stream": {}},
        },
        **NOT_FOUND_RESPONSE,
        **SERVER_ERROR_RESPONSE,
    },
)
async def download_document(
    document_id: int,
    deps=Depends(get_document_dependencies),
):
    """Serve a document's content as an attachment."""
    document_service = deps["document_service"]

    log_operation_start("Document download", document_id=document_id)

    try:
        download = await document_service.download_document(document_id)
    except DocumentNotFoundError as e:
        raise handle_document_not_found_error(
            e, "document download", document_id=document_id
        )
    except DatabaseError as e:
        raise handle_database_error(e, "document download", document_id=document_id)

    document = download.document
    log_operation_success(
        "Document download",
        document_id=document_id,
        filename=document.file_name,
        file_size=document.file_size,
    )

    return Response(
        content=download.content,
        headers={
            "Content-Type": document.file_type,
            "Content-Disposition": build_content_disposition(document.file_name),
        },
    )
