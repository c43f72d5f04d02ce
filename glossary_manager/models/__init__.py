"""Data models for the glossary manager."""

from .glossary import (
    TermEntry,
    SourceReference,
    GlossaryDocument,
    default_document,
)
from .response import (
    SearchResult,
    SearchResponse,
    SuggestResponse,
    MutationResponse,
    ImportResponse,
    CitationResponse,
    CloudSyncResponse,
    ErrorResponse,
)
from .request import SearchRequest

__all__ = [
    "TermEntry",
    "SourceReference",
    "GlossaryDocument",
    "default_document",
    "SearchResult",
    "SearchResponse",
    "SuggestResponse",
    "MutationResponse",
    "ImportResponse",
    "CitationResponse",
    "CloudSyncResponse",
    "ErrorResponse",
    "SearchRequest",
]
