"""
Glossary Manager - term/definition/example records with tiered search.

Terms are compared by their canonical form (accents stripped, lower-cased).
Searches fall back from exact to substring to fuzzy edit-distance matches,
and autocomplete ranks prefix matches before interior matches.
"""

__version__ = "1.0.0"

from .core.engine import GlossaryEngine
from .models.glossary import GlossaryDocument, SourceReference, TermEntry
from .models.response import SearchResponse, SearchResult

__all__ = [
    "GlossaryEngine",
    "GlossaryDocument",
    "SourceReference",
    "TermEntry",
    "SearchResponse",
    "SearchResult",
]
