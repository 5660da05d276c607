"""
Document API modules.

This package contains the document API endpoints, split into focused modules.

Modules:
- document_upload: Document upload operations
- document_management: List, filter, get, update and delete
- document_download: Raw content download
- common: Shared utilities and dependencies
"""

__all__ = []
