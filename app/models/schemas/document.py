"""Document schemas for API requests and responses."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from app.models.document import DocumentModel


class DocumentResponse(BaseModel):
    """Document metadata returned to clients.

    Never carries the file content; bytes are only served by the download
    endpoint.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int = Field(
        ...,
        description="Document identifier assigned by the store",
        example=42,
    )
    file_name: str = Field(
        ...,
        description="Display and download name",
        example="invoice-2025-001.pdf",
    )
    file_type: str = Field(
        ...,
        description="MIME type recorded when the content was stored",
        example="application/pdf",
    )
    category: str = Field(
        ...,
        description="Free-form grouping tag",
        example="invoices",
    )
    file_size: int = Field(
        ...,
        ge=0,
        description="File size in bytes",
        example=1048576,
    )
    upload_date: datetime = Field(
        ...,
        description="Upload timestamp (ISO 8601)",
        example="2025-01-15T10:30:00Z",
    )

    @field_validator("upload_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Stores without timezone support (SQLite) hand back naive UTC values."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("upload_date")
    def serialize_datetime(self, value: datetime) -> Optional[str]:
        """Serialize datetime fields to ISO format."""
        return value.isoformat() if value else None


class DocumentDownload(BaseModel):
    """Metadata and content of one document, read in a single fetch."""

    document: DocumentResponse
    content: bytes


class DocumentPatch(BaseModel):
    """Partial update for a stored document.

    Only fields that were supplied with a non-empty value are present; an
    absent field means "leave unchanged". ``content`` and ``content_type``
    always travel together.
    """

    file_name: Optional[str] = None
    category: Optional[str] = None
    content: Optional[bytes] = None
    content_type: Optional[str] = None

    @classmethod
    def from_form(
        cls,
        file_name: Optional[str] = None,
        category: Optional[str] = None,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> "DocumentPatch":
        """Build a patch from raw form values; empty strings and empty files are dropped."""
        values = {}
        if file_name:
            values["file_name"] = file_name
        if category:
            values["category"] = category
        if content:
            values["content"] = content
            values["content_type"] = content_type
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set

    @property
    def replaces_content(self) -> bool:
        return self.content is not None

    def apply_to(self, model: DocumentModel) -> DocumentModel:
        """Write the present fields onto ``model`` in place."""
        if self.file_name is not None:
            model.file_name = self.file_name
        if self.replaces_content:
            model.replace_content(self.content, self.content_type)
        if self.category is not None:
            model.category = self.category
        return model


def to_document_response(model: DocumentModel) -> DocumentResponse:
    """Project a stored document onto its metadata-only response."""
    return DocumentResponse(
        id=model.id,
        file_name=model.file_name,
        file_type=model.file_type,
        category=model.category,
        file_size=model.file_size,
        upload_date=model.upload_date,
    )
