"""Health check and monitoring endpoints.

Provides endpoints for:
- Basic health checks
- Detailed service status
- Kubernetes readiness/liveness probes
"""

import time
from typing import Dict, Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import get_logger
from app.core.db_client import db

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "status": "running",
        "docs": "/docs" if settings.DEBUG else None,
        "redoc": "/redoc" if settings.DEBUG else None,
        "health": "/health",
        "status_endpoint": "/status",
        "documents": f"{settings.API_PREFIX}/documents",
    }


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint with database connectivity verification.

    Returns 200 if healthy, 503 if database is unavailable.
    Used by load balancers and orchestration tools.
    """
    db_available = await db.test_connection(timeout=5.0)

    if not db_available:
        logger.warning("Health check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "timestamp": time.time(),
                "version": settings.VERSION,
                "environment": settings.ENVIRONMENT,
                "database": "unavailable",
            },
        )

    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected",
    }


@router.get("/status")
async def detailed_status() -> Dict[str, Any]:
    """Detailed status endpoint with service health checks."""
    db_available = await db.test_connection(timeout=5.0)

    return {
        "application": {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG,
            "status": "healthy" if db_available else "degraded",
        },
        "services": {
            "database": {
                "status": "connected" if db_available else "unavailable",
                "backend": "sqlite" if settings.is_sqlite else "postgresql",
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_stats": db.get_pool_stats(),
            },
        },
        "configuration": {
            "cors_enabled": True,
            "cors_origins": settings.resolved_cors_origins,
            "api_prefix": settings.API_PREFIX,
            "log_level": settings.LOG_LEVEL,
            "log_format": settings.LOG_FORMAT,
        },
        "system": {
            "timestamp": time.time(),
        },
    }


@router.get("/ready")
async def readiness_check() -> Dict[str, Any]:
    """Readiness probe endpoint for Kubernetes."""
    db_available = await db.test_connection(timeout=5.0)

    if not db_available:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "ready": False,
                "reason": "Database not ready",
                "timestamp": time.time(),
            },
        )

    return {"ready": True, "timestamp": time.time()}


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness probe endpoint for Kubernetes."""
    return {"alive": True, "timestamp": time.time()}
