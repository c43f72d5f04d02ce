"""Main FastAPI application for the Glossary Manager."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from . import engine_instance
from .api import (
    search_router,
    entries_router,
    sources_router,
    transfer_router,
    cloud_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .models.response import ErrorResponse

settings = get_settings()

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Glossary Manager service", version=settings.app_version)

    try:
        engine_instance.load_glossary()
        engine_instance.persist_changes()
    except Exception as e:
        logger.error("Failed to load glossary", error=str(e))
        raise

    yield

    logger.info("Shutting down Glossary Manager service")


app = FastAPI(
    title=settings.app_name,
    description="Glossary of terms with accent-insensitive exact, substring and fuzzy search",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


app.include_router(search_router)
app.include_router(entries_router)
app.include_router(sources_router)
app.include_router(transfer_router)
app.include_router(cloud_router)
app.include_router(health_router)
app.include_router(metrics_router)


@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Glossary of terms with accent-insensitive exact, substring and fuzzy search",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "search": "/api/v1/search?q=term",
            "suggest": "/api/v1/suggest?q=te",
            "entries": "/api/v1/entries",
            "sources": "/api/v1/sources",
            "csv_export": "/api/v1/export/csv",
            "csv_import": "/api/v1/import/csv",
            "docx_export": "/api/v1/export/docx",
            "cloud_load": "/api/v1/cloud/load",
            "cloud_save": "/api/v1/cloud/save",
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "glossary_manager.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
