"""FastAPI Application Entry Point.

Document storage service built with FastAPI, featuring:
- Binary file upload with category and display name
- Metadata listing, category filtering and partial updates
- Raw content download with attachment headers
- Relational storage through async SQLAlchemy (PostgreSQL or SQLite)
"""

from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Depends

from app.core.config import settings
from app.core.logging import configure_logging, setup_request_logging, get_logger
from app.core.exceptions import setup_exception_handlers
from app.core.db_client import db
from app.core.openapi import create_custom_openapi
from app.core.middleware import setup_cors_middleware, setup_timing_middleware
from app.models.schemas import DocumentResponse

# Configure logging first
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    logger.info(
        "Starting application",
        project_name=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
    )

    startup_tasks = []

    # Initialize database connection
    try:
        engine = await db.get_engine_async()
        if engine:
            if settings.should_create_tables:
                await db.create_tables()
                startup_tasks.append("Database tables created/verified")

            if await db.test_connection():
                startup_tasks.append(f"Database connected ({engine.dialect.name})")
            else:
                logger.warning("Database connection test failed")
        else:
            logger.warning("Database engine not initialized")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production:
            raise

    logger.info("Application startup completed", tasks=startup_tasks)

    yield

    # Shutdown
    logger.info("Shutting down application")

    shutdown_tasks = []

    try:
        await db.close_all()
        shutdown_tasks.append("Database connections closed")
    except Exception as e:
        logger.error("Error closing database", error=str(e))

    logger.info("Application shutdown completed", tasks=shutdown_tasks)


# API Description
API_DESCRIPTION = f"""# Document Storage API

## Overview
Upload, list, filter, download, update and delete binary documents.
Each document is stored as one relational row holding its bytes and metadata.

## Documents
**Metadata** responses use camelCase keys:
`id`, `fileName`, `fileType`, `category`, `fileSize`, `uploadDate`

**Key Endpoints:**
- `POST {settings.API_PREFIX}/documents/upload` - Store a file
- `GET {settings.API_PREFIX}/documents` - List all documents
- `GET {settings.API_PREFIX}/documents/category/{{category}}` - Filter by category
- `GET {settings.API_PREFIX}/documents/download/{{id}}` - Download content
"""

# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    redirect_slashes=True,
    description=API_DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
    servers=[
        {"url": f"http://localhost:{settings.PORT}", "description": "Development server"},
    ],
)

# Custom OpenAPI schema
app.openapi = lambda: create_custom_openapi(app)

# Setup middleware (CORS first)
setup_cors_middleware(app)

# Setup exception handlers AFTER CORS middleware
setup_exception_handlers(app)

# Setup request logging
setup_request_logging(app)

# Middleware for timing requests
setup_timing_middleware(app)


# Include health router (root level endpoints)
from app.api.health import router as health_router

app.include_router(health_router, tags=["Health"])

from app.api.documents_main import router as documents_router
from app.api.documents_modules.common import get_document_dependencies
from app.api.documents_modules.document_management import list_documents


# Direct route handler to bypass redirect issues for /api/documents (no trailing slash)
# MUST BE DEFINED BEFORE including the router to take precedence
@app.get(
    f"{settings.API_PREFIX}/documents",
    response_model=List[DocumentResponse],
    include_in_schema=False,
)
async def documents_no_slash_direct(deps=Depends(get_document_dependencies)):
    """Direct handler for /api/documents (no trailing slash) to bypass FastAPI redirect behavior."""
    return await list_documents(deps=deps)


# Document router - AFTER the direct route handler
app.include_router(
    documents_router, prefix=f"{settings.API_PREFIX}/documents", tags=["Documents"]
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
