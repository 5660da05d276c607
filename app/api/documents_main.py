"""
Document API Router

This module serves as the main aggregator for all document-related endpoints,
organizing functionality into focused sub-modules:

- document_upload.py: Document upload operations
- document_management.py: List, filter, get, update and delete
- document_download.py: Raw content download
- common.py: Shared utilities and dependencies
"""

from fastapi import APIRouter

# Import all sub-routers
from app.api.documents_modules.document_upload import router as upload_router
from app.api.documents_modules.document_management import router as management_router
from app.api.documents_modules.document_download import router as download_router

# Create main router
router = APIRouter()

# Include all sub-routers with their specific functionality
# Order matters: specific routes must come before generic path parameter routes

# 1. Routes without path parameters (no conflicts)
router.include_router(upload_router)

# 2. Download router with specific paths (must come before /{document_id})
router.include_router(download_router)

# 3. Generic path parameter routes (MUST BE LAST - has /{document_id})
router.include_router(management_router)
