"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..config import get_settings
from ..models.request import SearchRequest
from ..models.response import SearchResponse, SuggestResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global glossary engine instance
from ..engine_instance import glossary_engine


def _check_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search glossary terms",
    description="Exact match first, then substring, then fuzzy edit-distance matches"
)
async def search_terms(
    q: str = Query("", description="Search query, empty lists every entry"),
    fuzzy: Optional[bool] = Query(None, description="Enable the fuzzy tier"),
    tolerance: Optional[int] = Query(
        None,
        ge=0,
        le=3,
        description="Maximum edit distance for fuzzy matches (0-3)"
    ),
    ascending: bool = Query(True, description="Sort terms A-Z (false for Z-A)")
) -> SearchResponse:
    """
    Search the glossary.

    Returns the first non-empty tier: exact matches, substring matches,
    or fuzzy matches ordered by edit distance.
    """
    _check_length(q)
    try:
        return glossary_engine.search(q, fuzzy=fuzzy, tolerance=tolerance, ascending=ascending)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search the glossary using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    _check_length(request.query)
    try:
        return glossary_engine.search(
            request.query,
            fuzzy=request.fuzzy,
            tolerance=request.tolerance,
            ascending=request.ascending
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/suggest",
    response_model=SuggestResponse,
    summary="Autocomplete suggestions",
    description="Terms starting with the query, then terms containing it (at most 8)"
)
async def suggest_terms(
    q: str = Query("", description="Partial query")
) -> SuggestResponse:
    """
    Get autocomplete suggestions for a partially typed term.

    An empty query yields no suggestions.
    """
    _check_length(q)
    try:
        return SuggestResponse(query=q, suggestions=glossary_engine.suggest(q))

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )
