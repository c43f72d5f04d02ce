"""Term entry CRUD endpoints."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, Query

from ..models.glossary import TermEntry
from ..models.response import MutationResponse

router = APIRouter(prefix="/api/v1", tags=["entries"])
logger = structlog.get_logger(__name__)

# Import the global glossary engine instance
from ..engine_instance import glossary_engine
from .persistence import persist_or_fail


@router.get(
    "/entries",
    response_model=List[TermEntry],
    summary="List entries",
    description="All entries sorted by term"
)
async def list_entries(
    ascending: bool = Query(True, description="Sort A-Z (false for Z-A)")
) -> List[TermEntry]:
    return glossary_engine.store.sorted_entries(ascending=ascending)


@router.get(
    "/entries/{term}",
    response_model=TermEntry,
    summary="Get entry",
    description="Look up an entry by term, ignoring case and accents"
)
async def get_entry(
    term: str = Path(..., description="The term to look up")
) -> TermEntry:
    entry = glossary_engine.store.get(term)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Term '{term}' not found"
        )
    return entry


@router.put(
    "/entries",
    response_model=MutationResponse,
    summary="Create or replace entry",
    description="Upsert an entry; an existing entry with the same canonical term is replaced"
)
async def upsert_entry(entry: TermEntry) -> MutationResponse:
    """
    Create or replace a glossary entry.

    Terms are compared by canonical form, so "Cafe" replaces "café".
    """
    snapshot = glossary_engine.to_document()
    existed = glossary_engine.store.contains(entry.term) if entry.term else False
    if not glossary_engine.store.upsert(entry):
        raise HTTPException(
            status_code=400,
            detail="Term cannot be empty"
        )

    persist_or_fail(snapshot)
    logger.info("Entry upserted", term=entry.term, created=not existed)

    return MutationResponse(
        message=f"Entry '{entry.term}' {'updated' if existed else 'created'}",
        term=entry.term,
        created=not existed,
        total_entries=len(glossary_engine.store.entries())
    )


@router.delete(
    "/entries/{term}",
    response_model=MutationResponse,
    summary="Delete entry",
    description="Remove an entry by term, ignoring case and accents"
)
async def delete_entry(
    term: str = Path(..., description="The term to remove")
) -> MutationResponse:
    snapshot = glossary_engine.to_document()
    if not glossary_engine.store.remove(term):
        raise HTTPException(
            status_code=404,
            detail=f"Term '{term}' not found"
        )

    persist_or_fail(snapshot)
    logger.info("Entry removed", term=term)

    return MutationResponse(
        message=f"Entry '{term}' removed successfully",
        term=term,
        total_entries=len(glossary_engine.store.entries())
    )
