"""Exceptions raised by the glossary manager outside the pure search core."""

from typing import Optional


class GlossaryError(Exception):
    """Base class for glossary manager errors."""


class StorageError(GlossaryError):
    """The local glossary file could not be read or written."""


class CsvImportError(GlossaryError):
    """An uploaded CSV file cannot be imported."""


class CloudSyncError(GlossaryError):
    """A round-trip to the cloud drive failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
