"""OneDrive sync endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from ..cloud_sync import OneDriveClient
from ..exceptions import CloudSyncError
from ..models.response import CloudSyncResponse

router = APIRouter(prefix="/api/v1/cloud", tags=["cloud"])
logger = structlog.get_logger(__name__)

# Import the global glossary engine instance
from ..engine_instance import get_cloud_client, glossary_engine
from .persistence import persist_or_fail


@router.post(
    "/load",
    response_model=CloudSyncResponse,
    summary="Load from OneDrive",
    description="Replace the local glossary with the OneDrive copy, creating it if missing"
)
def cloud_load(client: OneDriveClient = Depends(get_cloud_client)) -> CloudSyncResponse:
    try:
        document = client.load_or_init()
    except CloudSyncError as e:
        logger.error("Cloud load failed", error=str(e), status_code=e.status_code)
        raise HTTPException(status_code=502, detail=str(e))

    snapshot = glossary_engine.to_document()
    glossary_engine.load_document(document)
    persist_or_fail(snapshot)

    return CloudSyncResponse(
        message="Loaded from OneDrive",
        total_entries=len(document.entries),
        total_sources=len(document.sources)
    )


@router.post(
    "/save",
    response_model=CloudSyncResponse,
    summary="Save to OneDrive",
    description="Overwrite the OneDrive copy with the local glossary"
)
def cloud_save(client: OneDriveClient = Depends(get_cloud_client)) -> CloudSyncResponse:
    document = glossary_engine.to_document()
    try:
        client.save_all(document)
    except CloudSyncError as e:
        logger.error("Cloud save failed", error=str(e), status_code=e.status_code)
        raise HTTPException(status_code=502, detail=str(e))

    return CloudSyncResponse(
        message="Saved to OneDrive",
        total_entries=len(document.entries),
        total_sources=len(document.sources)
    )
