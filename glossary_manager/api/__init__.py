"""API endpoints for the glossary manager."""

from .search import router as search_router
from .entries import router as entries_router
from .sources import router as sources_router
from .transfer import router as transfer_router
from .cloud import router as cloud_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "entries_router",
    "sources_router",
    "transfer_router",
    "cloud_router",
    "health_router",
    "metrics_router",
]
