"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter, HTTPException

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global glossary engine instance
from ..engine_instance import glossary_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Search statistics, glossary size and process memory usage"
)
async def get_metrics() -> MetricsResponse:
    try:
        stats = glossary_engine.get_stats()
        store_stats = stats["store_stats"]

        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            tier_hits=stats["tier_hits"],
            total_entries=store_stats["total_entries"],
            total_sources=store_stats["total_sources"],
            memory_usage_mb=round(memory_usage_mb, 2)
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )
