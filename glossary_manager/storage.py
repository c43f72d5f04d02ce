"""JSON file persistence for the glossary document."""

import json
import os
import tempfile
from typing import Optional

import structlog
from pydantic import ValidationError

from .exceptions import StorageError
from .models.glossary import GlossaryDocument

logger = structlog.get_logger(__name__)


class JsonGlossaryRepository:
    """Reads and writes the glossary as a single JSON file (last write wins)."""

    def __init__(self, path: str) -> None:
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Optional[GlossaryDocument]:
        """
        Load the stored glossary.

        Returns:
            The stored document, or None if the file does not exist

        Raises:
            StorageError: If the file is not a valid glossary document
        """
        if not self.exists():
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
            document = GlossaryDocument.model_validate(payload)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise StorageError(f"Cannot read glossary file {self.path}: {e}") from e

        logger.info(
            "Glossary file loaded",
            path=self.path,
            total_entries=len(document.entries),
            total_sources=len(document.sources)
        )
        return document

    def save(self, document: GlossaryDocument) -> None:
        """
        Write the glossary, replacing the file atomically.

        Raises:
            StorageError: If the file cannot be written
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".glossar-", suffix=".json", dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(document.to_payload(), f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Cannot write glossary file {self.path}: {e}") from e

        logger.debug("Glossary file saved", path=self.path, total_entries=len(document.entries))
