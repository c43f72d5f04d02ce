"""Source reference endpoints."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path

from ..models.glossary import SourceReference
from ..models.response import CitationResponse

router = APIRouter(prefix="/api/v1", tags=["sources"])
logger = structlog.get_logger(__name__)

# Import the global glossary engine instance
from ..engine_instance import glossary_engine
from .persistence import persist_or_fail


@router.get(
    "/sources",
    response_model=List[SourceReference],
    summary="List sources",
    description="All source references in insertion order"
)
async def list_sources() -> List[SourceReference]:
    return glossary_engine.store.list_sources()


@router.post(
    "/sources",
    response_model=SourceReference,
    status_code=201,
    summary="Add source",
    description="Add a source reference; an existing label gets the new description"
)
async def add_source(source: SourceReference) -> SourceReference:
    snapshot = glossary_engine.to_document()
    if not glossary_engine.store.add_source(source):
        raise HTTPException(
            status_code=400,
            detail="Source label cannot be empty"
        )

    persist_or_fail(snapshot)
    logger.info("Source added", label=source.label)
    return source


@router.delete(
    "/sources/{label}",
    summary="Remove source",
    description="Remove a source reference; entries keep citing the label"
)
async def remove_source(
    label: str = Path(..., description="The source label to remove")
) -> dict:
    snapshot = glossary_engine.to_document()
    if not glossary_engine.store.remove_source(label):
        raise HTTPException(
            status_code=404,
            detail=f"Source '{label}' not found"
        )

    persist_or_fail(snapshot)
    logger.info("Source removed", label=label)
    return {"message": f"Source '{label}' removed successfully"}


@router.get(
    "/sources/{label}/terms",
    response_model=CitationResponse,
    summary="Terms citing a source",
    description="Reverse lookup of the entries referencing a source label"
)
async def terms_citing(
    label: str = Path(..., description="The source label")
) -> CitationResponse:
    terms = glossary_engine.store.terms_citing(label)
    return CitationResponse(label=label, terms=terms, total_terms=len(terms))
