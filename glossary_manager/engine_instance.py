"""Global glossary engine and repository instances to avoid circular imports."""

import structlog

from .cloud_sync import OneDriveClient
from .config import get_settings
from .core.engine import GlossaryEngine
from .models.glossary import default_document
from .storage import JsonGlossaryRepository

logger = structlog.get_logger(__name__)

settings = get_settings()

glossary_engine = GlossaryEngine(
    fuzzy_enabled=settings.fuzzy_enabled,
    fuzzy_tolerance=settings.fuzzy_tolerance,
    suggestion_limit=settings.suggestion_limit,
    include_corrections=settings.include_corrections
)
repository = JsonGlossaryRepository(settings.store_path)


def load_glossary() -> None:
    """Fill the engine from the repository, or with seed data if nothing is stored."""
    document = repository.load()
    if document is None:
        logger.info("No stored glossary found, using default entries", path=repository.path)
        document = default_document()
    glossary_engine.load_document(document)


def persist_changes() -> None:
    """Write the current glossary to the repository if persistence is enabled."""
    if settings.persist_changes:
        repository.save(glossary_engine.to_document())


def get_cloud_client() -> OneDriveClient:
    """Build the OneDrive client from settings (FastAPI dependency)."""
    return OneDriveClient(
        access_token=settings.graph_access_token,
        base_url=settings.graph_base_url,
        file_path=settings.graph_file_path,
        folder_name=settings.graph_folder_name,
        timeout=settings.graph_timeout
    )
