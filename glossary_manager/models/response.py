"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .glossary import TermEntry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(TermEntry):
    """A matched entry, with its edit distance when found by the fuzzy tier."""

    distance: Optional[int] = Field(None, description="Edit distance for fuzzy matches")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    tier: str = Field(..., description="Tier that produced the results (all, exact, substring, fuzzy, none)")
    fuzzy_enabled: bool = Field(..., description="Whether the fuzzy tier was enabled")
    fuzzy_tolerance: int = Field(..., description="Maximum edit distance used by the fuzzy tier")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Matched entries")
    suggestions: Optional[List[str]] = Field(None, description="Similar terms if nothing matched")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class SuggestResponse(BaseModel):
    """Autocomplete suggestions for a partial query."""

    query: str = Field(..., description="Partial query")
    suggestions: List[TermEntry] = Field(..., description="Prefix matches first, then interior matches")


class MutationResponse(BaseModel):
    """Result of a create, update or delete call."""

    message: str = Field(..., description="Human readable outcome")
    term: Optional[str] = Field(None, description="Affected term")
    created: Optional[bool] = Field(None, description="Whether a new record was created")
    total_entries: int = Field(..., description="Number of entries after the change")


class ImportResponse(BaseModel):
    """Outcome of a CSV import."""

    message: str = Field(..., description="Human readable outcome")
    created: int = Field(..., description="New entries")
    updated: int = Field(..., description="Replaced entries")
    skipped: int = Field(..., description="Rows without a term")
    total_entries: int = Field(..., description="Number of entries after the import")


class CitationResponse(BaseModel):
    """Terms that cite a source label."""

    label: str = Field(..., description="Source label")
    terms: List[str] = Field(..., description="Terms referencing the label")
    total_terms: int = Field(..., description="Number of citing terms")


class CloudSyncResponse(BaseModel):
    """Outcome of a cloud load or save."""

    message: str = Field(..., description="Human readable outcome")
    total_entries: int = Field(..., description="Entries in the synced document")
    total_sources: int = Field(..., description="Sources in the synced document")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average search time")
    tier_hits: Dict[str, int] = Field(..., description="Searches answered per tier")
    total_entries: int = Field(..., description="Entries in the glossary")
    total_sources: int = Field(..., description="Sources in the glossary")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
