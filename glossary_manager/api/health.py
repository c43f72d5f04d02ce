"""Health check and monitoring API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global glossary engine instance
from .. import engine_instance
from ..engine_instance import glossary_engine

# Track application start time
app_start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the glossary service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the glossary service.

    Runs a search against the live store and reports whether the local
    glossary file and a cloud token are available.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "glossary_engine": "healthy",
            "local_store": "healthy" if engine_instance.repository.exists() or not settings.persist_changes else "degraded",
            "cloud_sync": "configured" if settings.graph_access_token else "not_configured",
        }

        try:
            glossary_engine.matcher.search("test", glossary_engine.store.sorted_entries())
        except Exception:
            dependencies["glossary_engine"] = "unhealthy"

        checked = [dependencies["glossary_engine"], dependencies["local_store"]]
        if all(status == "healthy" for status in checked):
            status = "healthy"
        elif any(status == "unhealthy" for status in checked):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    try:
        stats = glossary_engine.get_stats()

        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": _now(),
                "store_stats": stats.get("store_stats", {})
            }
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": _now()
            }
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": _now(),
            "uptime": time.time() - app_start_time
        }
    )
