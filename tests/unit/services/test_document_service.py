"""
Unit tests for the Document services.

Exercises document operations against an in-memory SQLite database.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import undefer


async def _stored_row(database, document_id):
    """Load a row with its content for invariant checks."""
    from app.models.document import DocumentModel

    async with database.session() as session:
        result = await session.execute(
            select(DocumentModel)
            .where(DocumentModel.id == document_id)
            .options(undefer(DocumentModel.file_data))
        )
        return result.scalar_one_or_none()


async def _row_count(database) -> int:
    from app.models.document import DocumentModel

    async with database.session() as session:
        result = await session.execute(select(func.count()).select_from(DocumentModel))
        return result.scalar()


class TestDocumentBaseServiceExceptions:
    """Tests for document service exception classes."""

    @pytest.mark.unit
    def test_document_not_found_error(self):
        """Test DocumentNotFoundError message and code."""
        from app.services.document.document_base_service import DocumentNotFoundError

        error = DocumentNotFoundError(42)

        assert str(error) == "Document not found with id: 42"
        assert error.error_code == "DOCUMENT_NOT_FOUND"
        assert error.document_id == 42

    @pytest.mark.unit
    def test_invalid_file_error(self):
        """Test InvalidFileError default message and code."""
        from app.services.document.document_base_service import InvalidFileError

        error = InvalidFileError()

        assert str(error) == "File cannot be empty"
        assert error.error_code == "INVALID_FILE"

    @pytest.mark.unit
    def test_base_service_has_db_property(self):
        """Test DocumentBaseService exposes the shared database manager."""
        from app.core.db_client import db
        from app.services.document.document_base_service import DocumentBaseService

        assert DocumentBaseService().db is db


class TestDocumentUpload:
    """Tests for document creation."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_upload_returns_metadata(self, database, document_service, upload_file_factory):
        """Test upload of a small text file."""
        result = await document_service.upload_document(
            file=upload_file_factory(b"hello", "a.txt", "text/plain"),
            category="notes",
            filename="a.txt",
        )

        assert result.id is not None
        assert result.file_name == "a.txt"
        assert result.file_type == "text/plain"
        assert result.category == "notes"
        assert result.file_size == 5
        assert result.upload_date is not None

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_upload_stores_size_of_content(
        self, database, document_service, upload_file_factory, binary_content
    ):
        """Test that the stored size equals the stored byte count."""
        result = await document_service.upload_document(
            file=upload_file_factory(binary_content, "blob.bin"),
            category="binary",
            filename="blob.bin",
        )

        row = await _stored_row(database, result.id)
        assert row.file_data == binary_content
        assert row.file_size == len(row.file_data)

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_upload_empty_file_creates_nothing(
        self, database, document_service, upload_file_factory
    ):
        """Test that an empty upload is rejected before any write."""
        from app.services.document.document_base_service import InvalidFileError

        with pytest.raises(InvalidFileError):
            await document_service.upload_document(
                file=upload_file_factory(b"", "empty.txt", "text/plain"),
                category="notes",
                filename="empty.txt",
            )

        assert await _row_count(database) == 0

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, database, document_service, upload_file_factory):
        """Test that each upload gets its own id."""
        first = await document_service.upload_document(
            upload_file_factory(b"one"), "c", "one.bin"
        )
        second = await document_service.upload_document(
            upload_file_factory(b"two"), "c", "two.bin"
        )

        assert first.id != second.id


class TestDocumentQueries:
    """Tests for listing and category filtering."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_list_documents_ordered_by_id(
        self, database, document_service, upload_file_factory
    ):
        """Test listing every document."""
        ids = []
        for name in ("c.txt", "a.txt", "b.txt"):
            result = await document_service.upload_document(
                upload_file_factory(b"data", name), "misc", name
            )
            ids.append(result.id)

        documents = await document_service.list_documents()

        assert [doc.id for doc in documents] == sorted(ids)

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_list_documents_empty(self, database, document_service):
        """Test listing with nothing stored."""
        assert await document_service.list_documents() == []

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_list_by_category_exact_match(
        self, database, document_service, upload_file_factory
    ):
        """Test that category filtering is exact and case-sensitive."""
        await document_service.upload_document(upload_file_factory(b"1"), "Invoices", "1.txt")
        await document_service.upload_document(upload_file_factory(b"2"), "invoices", "2.txt")
        await document_service.upload_document(upload_file_factory(b"3"), "invoices", "3.txt")

        documents = await document_service.list_documents_by_category("invoices")

        assert [doc.file_name for doc in documents] == ["2.txt", "3.txt"]
        assert all(doc.category == "invoices" for doc in documents)
        assert await document_service.list_documents_by_category("receipts") == []


class TestDocumentRetrieval:
    """Tests for get and download."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_get_unknown_id(self, database, document_service):
        """Test that a missing id raises DocumentNotFoundError."""
        from app.services.document.document_base_service import DocumentNotFoundError

        with pytest.raises(DocumentNotFoundError) as exc_info:
            await document_service.get_document(999)

        assert exc_info.value.document_id == 999

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_download_returns_uploaded_bytes(
        self, database, document_service, upload_file_factory, sample_pdf_content
    ):
        """Test that download returns exactly what was uploaded."""
        created = await document_service.upload_document(
            upload_file_factory(sample_pdf_content, "doc.pdf", "application/pdf"),
            "reports",
            "doc.pdf",
        )

        download = await document_service.download_document(created.id)

        assert download.content == sample_pdf_content
        assert download.document == created

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_download_unknown_id(self, database, document_service):
        """Test that downloading a missing id raises DocumentNotFoundError."""
        from app.services.document.document_base_service import DocumentNotFoundError

        with pytest.raises(DocumentNotFoundError):
            await document_service.download_document(999)

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_ids_outside_column_range_are_not_found(self, database, document_service):
        """Test that ids the id column cannot hold behave like missing ids."""
        from app.services.document.document_base_service import DocumentNotFoundError

        for document_id in (2**63, 0, -1):
            with pytest.raises(DocumentNotFoundError):
                await document_service.get_document(document_id)
            with pytest.raises(DocumentNotFoundError):
                await document_service.download_document(document_id)
            with pytest.raises(DocumentNotFoundError):
                await document_service.delete_document(document_id)


class TestDocumentUpdate:
    """Tests for partial updates."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_update_category_only(self, database, document_service, upload_file_factory):
        """Test that changing the category leaves name and content alone."""
        created = await document_service.upload_document(
            upload_file_factory(b"hello", "a.txt", "text/plain"), "x", "a.txt"
        )

        updated = await document_service.update_document(created.id, category="y")

        assert updated.category == "y"
        assert updated.file_name == "a.txt"
        assert updated.file_size == 5
        assert updated.upload_date == created.upload_date
        download = await document_service.download_document(created.id)
        assert download.content == b"hello"

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_update_replaces_content(self, database, document_service, upload_file_factory):
        """Test that a new file replaces type, bytes and size together."""
        created = await document_service.upload_document(
            upload_file_factory(b"hello", "a.txt", "text/plain"), "x", "a.txt"
        )

        updated = await document_service.update_document(
            created.id,
            file=upload_file_factory(b"{\"k\": 1}", "a.json", "application/json"),
        )

        assert updated.file_type == "application/json"
        assert updated.file_size == len(b"{\"k\": 1}")
        assert updated.file_name == "a.txt"
        row = await _stored_row(database, created.id)
        assert row.file_data == b"{\"k\": 1}"
        assert row.file_size == len(row.file_data)

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_update_ignores_empty_values(
        self, database, document_service, upload_file_factory
    ):
        """Test that empty strings and an empty file leave the document unchanged."""
        created = await document_service.upload_document(
            upload_file_factory(b"hello", "a.txt", "text/plain"), "x", "a.txt"
        )

        updated = await document_service.update_document(
            created.id,
            file=upload_file_factory(b"", "other.bin"),
            category="",
            filename="",
        )

        assert updated == created
        download = await document_service.download_document(created.id)
        assert download.content == b"hello"

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_update_unknown_id(self, database, document_service):
        """Test that updating a missing id raises DocumentNotFoundError."""
        from app.services.document.document_base_service import DocumentNotFoundError

        with pytest.raises(DocumentNotFoundError):
            await document_service.update_document(999, category="y")


class TestDocumentDeletion:
    """Tests for hard deletion."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_delete_removes_document(self, database, document_service, upload_file_factory):
        """Test that get and download fail after delete."""
        from app.services.document.document_base_service import DocumentNotFoundError

        created = await document_service.upload_document(
            upload_file_factory(b"bye"), "tmp", "bye.txt"
        )

        await document_service.delete_document(created.id)

        with pytest.raises(DocumentNotFoundError):
            await document_service.get_document(created.id)
        with pytest.raises(DocumentNotFoundError):
            await document_service.download_document(created.id)
        assert await _row_count(database) == 0

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, database, document_service, upload_file_factory):
        """Test that deleting a missing id raises and touches nothing."""
        from app.services.document.document_base_service import DocumentNotFoundError

        await document_service.upload_document(upload_file_factory(b"keep"), "tmp", "keep.txt")

        with pytest.raises(DocumentNotFoundError):
            await document_service.delete_document(999)

        assert await _row_count(database) == 1


class TestStoreFailures:
    """Tests for store error translation."""

    @pytest.mark.unit
    @pytest.mark.db
    @pytest.mark.asyncio
    async def test_missing_table_raises_database_error(self, database, document_service):
        """Test that SQLAlchemy errors surface as DatabaseError."""
        from app.core.exceptions import DatabaseError

        await database.drop_tables()

        with pytest.raises(DatabaseError) as exc_info:
            await document_service.list_documents()

        assert exc_info.value.error_code == "DATABASE_ERROR"
        assert exc_info.value.details["error_type"] == "OperationalError"
