"""
Workflow tests for the document lifecycle.

Runs upload, list, filter, update, download and delete in sequence
through the HTTP API.
"""

import pytest


class TestDocumentLifecycle:
    """End-to-end document lifecycle."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_full_lifecycle(self, async_client, upload_document):
        """Test a document from upload to deletion."""
        # Upload
        response = await upload_document(b"hello", filename="a.txt", category="notes")
        assert response.status_code == 200
        created = response.json()
        assert created["fileSize"] == 5
        document_id = created["id"]

        # Listed and filterable
        listed = (await async_client.get("/api/documents")).json()
        assert [d["id"] for d in listed] == [document_id]
        in_category = (await async_client.get("/api/documents/category/notes")).json()
        assert [d["id"] for d in in_category] == [document_id]

        # Download round trip
        download = await async_client.get(f"/api/documents/download/{document_id}")
        assert download.content == b"hello"

        # Recategorize
        updated = (
            await async_client.put(f"/api/documents/{document_id}", data={"category": "archive"})
        ).json()
        assert updated["category"] == "archive"
        assert (await async_client.get("/api/documents/category/notes")).json() == []

        # Replace content
        replaced = (
            await async_client.put(
                f"/api/documents/{document_id}",
                files={"file": ("a.txt", b"hello, world", "text/plain")},
            )
        ).json()
        assert replaced["fileSize"] == len(b"hello, world")
        download = await async_client.get(f"/api/documents/download/{document_id}")
        assert download.content == b"hello, world"

        # Delete
        assert (await async_client.delete(f"/api/documents/{document_id}")).status_code == 204
        assert (await async_client.get(f"/api/documents/{document_id}")).status_code == 404
        assert (
            await async_client.get(f"/api/documents/download/{document_id}")
        ).status_code == 404
        assert (await async_client.get("/api/documents")).json() == []

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_many_documents_across_categories(
        self, async_client, upload_document, document_data
    ):
        """Test filtering with several generated documents."""
        uploaded = {}
        for category in ("alpha", "beta", "alpha"):
            response = await upload_document(
                document_data["content"],
                filename=document_data["filename"],
                category=category,
            )
            uploaded.setdefault(category, []).append(response.json()["id"])

        for category, ids in uploaded.items():
            response = await async_client.get(f"/api/documents/category/{category}")
            assert [d["id"] for d in response.json()] == ids
            assert all(d["fileSize"] == len(document_data["content"]) for d in response.json())
