"""
Document management endpoints.

This module handles core document management operations, focusing on:
- Listing all documents and filtering by category
- Retrieving individual documents
- Partial updates of metadata and content
- Deleting documents (hard delete)
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import Response

from app.core.exceptions import DatabaseError
from app.models.schemas import DocumentResponse
from app.services.document_service import DocumentNotFoundError
from .common import (
    NOT_FOUND_RESPONSE,
    SERVER_ERROR_RESPONSE,
    get_document_dependencies,
    handle_database_error,
    handle_document_not_found_error,
    log_operation_start,
    log_operation_success,
    logger,
)

router = APIRouter()


@router.get(
    "/",
    response_model=List[DocumentResponse],
    summary="📋 List Documents",
    operation_id="listDocuments",
    description="""List metadata of every stored document, ordered by id.

File content is never included; use the download endpoint for bytes.

**Example Request:**
```bash
curl "http://localhost:8080/api/documents"
```""",
    responses=SERVER_ERROR_RESPONSE,
)
async def list_documents(deps=Depends(get_document_dependencies)):
    """List all documents."""
    document_service = deps["document_service"]

    try:
        documents = await document_service.list_documents()
    except DatabaseError as e:
        raise handle_database_error(e, "document listing")

    logger.debug("Documents listed", count=len(documents))
    return documents


@router.get(
    "/category/{category}",
    response_model=List[DocumentResponse],
    summary="🗂️ List Documents by Category",
    operation_id="listDocumentsByCategory",
    description="""List documents whose category exactly matches the path value.

Matching is case-sensitive. An unknown category returns an empty list.

**Example Request:**
```bash
curl "http://localhost:8080/api/documents/category/invoices"
```""",
    responses=SERVER_ERROR_RESPONSE,
)
async def list_documents_by_category(
    category: str,
    deps=Depends(get_document_dependencies),
):
    """List documents in one category."""
    document_service = deps["document_service"]

    try:
        documents = await document_service.list_documents_by_category(category)
    except DatabaseError as e:
        raise handle_database_error(e, "category listing", category=category)

    logger.debug("Documents listed by category", category=category, count=len(documents))
    return documents


@router.get(
    "/{document_id}",
    response_model=DocumentResponse,
    summary="📄 Get Document",
    operation_id="getDocument",
    description="""Get the metadata of one document.

**Path Parameters:**
- `document_id`: Document identifier""",
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def get_document(
    document_id: int,
    deps=Depends(get_document_dependencies),
):
    """Get document metadata by ID."""
    document_service = deps["document_service"]

    try:
        return await document_service.get_document(document_id)
    except DocumentNotFoundError as e:
        raise handle_document_not_found_error(
            e, "document retrieval", document_id=document_id
        )
    except DatabaseError as e:
        raise handle_database_error(e, "document retrieval", document_id=document_id)


@router.put(
    "/{document_id}",
    response_model=DocumentResponse,
    summary="✏️ Update Document",
    operation_id="updateDocument",
    description="""Partially update a document.

**Form Fields (all optional):**
- **file**: Replacement content; type, content and size change together
- **category**: New category
- **filename**: New display name

Absent or empty values leave the corresponding field unchanged, so an empty
replacement file keeps the stored content.

**Example Request:**
```bash
curl -X PUT "http://localhost:8080/api/documents/42" -F "category=archive"
```""",
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def update_document(
    document_id: int,
    file: Optional[UploadFile] = File(None, description="Replacement file"),
    category: Optional[str] = Form(None, description="New category"),
    filename: Optional[str] = Form(None, description="New display name"),
    deps=Depends(get_document_dependencies),
):
    """Apply a partial update to a document."""
    document_service = deps["document_service"]

    log_operation_start(
        "Document update",
        document_id=document_id,
        has_file=file is not None,
        category=category,
        filename=filename,
    )

    try:
        result = await document_service.update_document(
            document_id=document_id,
            file=file,
            category=category,
            filename=filename,
        )
    except DocumentNotFoundError as e:
        raise handle_document_not_found_error(
            e, "document update", document_id=document_id
        )
    except DatabaseError as e:
        raise handle_database_error(e, "document update", document_id=document_id)

    log_operation_success("Document update", document_id=document_id)
    return result


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="🗑️ Delete Document",
    operation_id="deleteDocument",
    description="""Permanently delete a document and its content.

Returns **204 No Content** on success and **404** if the id does not exist.""",
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def delete_document(
    document_id: int,
    deps=Depends(get_document_dependencies),
):
    """Delete a document by ID."""
    document_service = deps["document_service"]

    log_operation_start("Document deletion", document_id=document_id)

    try:
        await document_service.delete_document(document_id)
    except DocumentNotFoundError as e:
        raise handle_document_not_found_error(
            e, "document deletion", document_id=document_id
        )
    except DatabaseError as e:
        raise handle_database_error(e, "document deletion", document_id=document_id)

    log_operation_success("Document deletion", document_id=document_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
