"""Middleware configuration for FastAPI application.

Provides:
- CORS middleware setup (any origin may call the API)
- Request timing middleware
"""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def setup_cors_middleware(app: FastAPI) -> None:
    """Configure CORS middleware with settings from config.

    Args:
        app: FastAPI application instance
    """
    logger.info(
        "CORS configuration",
        environment=settings.ENVIRONMENT,
        origins=settings.resolved_cors_origins,
        credentials=settings.CORS_CREDENTIALS,
        methods=settings.CORS_METHODS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.resolved_cors_origins,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
        expose_headers=["Content-Disposition", "X-Process-Time"],
    )


def setup_timing_middleware(app: FastAPI) -> None:
    """Add request timing middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(round(process_time, 4))
        return response
