"""
Pytest configuration and fixtures for the test suite.

This module provides shared fixtures for unit and integration tests.
"""

import os
from io import BytesIO
from typing import Dict, Any, AsyncGenerator, Optional
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from faker import Faker
from httpx import AsyncClient, ASGITransport
from starlette.datastructures import Headers, UploadFile

# Set test environment before importing app modules
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

fake = Faker()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (API)")
    config.addinivalue_line("markers", "db: Database tests")
    config.addinivalue_line("markers", "api: API endpoint tests")


# =============================================================================
# Test Data Generators
# =============================================================================

@pytest.fixture
def document_data() -> Dict[str, Any]:
    """Generate random document upload data for testing."""
    return {
        "filename": fake.file_name(extension="txt"),
        "category": fake.word(),
        "content": fake.text(max_nb_chars=200).encode("utf-8"),
    }


@pytest.fixture
def sample_pdf_content() -> bytes:
    """Generate minimal valid PDF content for testing."""
    return b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
trailer
<< /Root 1 0 R >>
%%EOF"""


@pytest.fixture
def binary_content() -> bytes:
    """Bytes covering every octet value, including NUL and non-UTF-8 sequences."""
    return bytes(range(256)) * 4


# =============================================================================
# Upload Helpers
# =============================================================================

def make_upload_file(
    content: bytes,
    filename: Optional[str] = "upload.bin",
    content_type: Optional[str] = None,
) -> UploadFile:
    """Build a real UploadFile as FastAPI would hand it to an endpoint."""
    headers = Headers({"content-type": content_type}) if content_type else Headers({})
    return UploadFile(
        file=BytesIO(content),
        size=len(content),
        filename=filename,
        headers=headers,
    )


@pytest.fixture
def upload_file_factory():
    """Factory fixture returning make_upload_file."""
    return make_upload_file


@pytest.fixture
def mock_upload_file():
    """Create a mock UploadFile object."""
    file = Mock()
    file.filename = "test_document.pdf"
    file.content_type = "application/pdf"
    file.size = 17
    file.read = AsyncMock(return_value=b"test file content")
    return file


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Any, None]:
    """
    Provide a fresh schema on the in-memory SQLite database.

    Every test runs on its own event loop, so the engine created here is
    private to the test and disposed at teardown.
    """
    from app.core.db_client import db

    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest.fixture
def mock_database_manager():
    """Create a mock DatabaseManager."""
    manager = Mock()
    manager.test_connection = AsyncMock(return_value=True)
    manager.create_tables = AsyncMock()
    manager.close = AsyncMock()
    manager.get_pool_stats = Mock(return_value={"initialized": True})
    return manager


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a test FastAPI application instance."""
    # Import here to ensure test environment is set
    from app.main import app as fastapi_app
    return fastapi_app


@pytest_asyncio.fixture
async def async_client(app, database) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def document_service():
    """Create a DocumentService wired to the shared database manager."""
    from app.services.document.document_service import DocumentService

    return DocumentService()


# =============================================================================
# API Helpers
# =============================================================================

@pytest.fixture
def upload_document(async_client):
    """Return a coroutine function that POSTs a multipart upload."""

    async def _upload(
        content: bytes,
        filename: str = "a.txt",
        category: str = "notes",
        content_type: Optional[str] = None,
    ):
        file_part = (filename, content, content_type) if content_type else (filename, content)
        return await async_client.post(
            "/api/documents/upload",
            files={"file": file_part},
            data={"category": category, "filename": filename},
        )

    return _upload
