"""Shared helper for routers that mutate the glossary."""

import structlog
from fastapi import HTTPException

from .. import engine_instance
from ..exceptions import StorageError
from ..models.glossary import GlossaryDocument

logger = structlog.get_logger(__name__)


def persist_or_fail(snapshot: GlossaryDocument) -> None:
    """
    Persist the glossary, turning storage failures into HTTP 500.

    Args:
        snapshot: Glossary state taken before the change; restored in memory
            if the change cannot be written
    """
    try:
        engine_instance.persist_changes()
    except StorageError as e:
        logger.error("Failed to persist glossary, reverting change", error=str(e))
        engine_instance.glossary_engine.load_document(snapshot)
        raise HTTPException(status_code=500, detail=str(e))
