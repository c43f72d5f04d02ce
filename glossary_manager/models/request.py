"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(default="", description="Search query, empty lists everything")
    fuzzy: Optional[bool] = Field(None, description="Enable the fuzzy tier (defaults to settings)")
    tolerance: Optional[int] = Field(
        None, ge=0, le=3, description="Maximum edit distance for fuzzy matches"
    )
    ascending: bool = Field(default=True, description="Sort terms A-Z (False for Z-A)")
