"""Core glossary search functionality."""

from .engine import GlossaryEngine
from .matcher import TermMatcher, levenshtein, search, search_with_details, suggest
from .normalizer import TextNormalizer, normalize
from .store import CitationIndex, GlossaryStore

__all__ = [
    "GlossaryEngine",
    "TermMatcher",
    "TextNormalizer",
    "GlossaryStore",
    "CitationIndex",
    "levenshtein",
    "normalize",
    "search",
    "search_with_details",
    "suggest",
]
