"""Glossary engine: owns the store and runs the matcher over sorted snapshots."""

import time
from typing import Any, Dict, List, Optional

import structlog

from ..models.glossary import GlossaryDocument, TermEntry
from ..models.response import SearchResponse, SearchResult
from .matcher import (
    TIER_ALL,
    TIER_EXACT,
    TIER_FUZZY,
    TIER_NONE,
    TIER_SUBSTRING,
    TermMatcher,
)
from .store import GlossaryStore

logger = structlog.get_logger(__name__)

TIERS = (TIER_ALL, TIER_EXACT, TIER_SUBSTRING, TIER_FUZZY, TIER_NONE)


class GlossaryEngine:
    """Main engine for glossary storage and term search."""

    def __init__(
        self,
        fuzzy_enabled: bool = True,
        fuzzy_tolerance: int = 2,
        suggestion_limit: int = 8,
        include_corrections: bool = True
    ) -> None:
        """
        Initialize the glossary engine.

        Args:
            fuzzy_enabled: Default for the fuzzy tier
            fuzzy_tolerance: Default maximum edit distance
            suggestion_limit: Maximum number of autocomplete suggestions
            include_corrections: Whether empty searches carry "did you mean" terms
        """
        self.store = GlossaryStore()
        self.matcher = TermMatcher(
            fuzzy_enabled=fuzzy_enabled,
            fuzzy_tolerance=fuzzy_tolerance,
            suggestion_limit=suggestion_limit,
        )
        self.include_corrections = include_corrections
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "total_suggestions": 0,
            "total_execution_time": 0.0,
            "tier_hits": {tier: 0 for tier in TIERS},
        }

    def load_document(self, document: GlossaryDocument) -> None:
        """Replace the glossary contents with ``document``."""
        self.store.load_document(document)
        logger.info(
            "Glossary loaded",
            total_entries=len(document.entries),
            total_sources=len(document.sources)
        )

    def to_document(self) -> GlossaryDocument:
        return self.store.to_document()

    def search(
        self,
        query: str,
        fuzzy: Optional[bool] = None,
        tolerance: Optional[int] = None,
        ascending: bool = True
    ) -> SearchResponse:
        """
        Search the glossary.

        Args:
            query: Search query, an empty query lists every entry
            fuzzy: Enable the fuzzy tier (engine default if None)
            tolerance: Maximum edit distance (engine default if None)
            ascending: Order of the snapshot handed to the matcher

        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.time()

        fuzzy_enabled = self.matcher.fuzzy_enabled if fuzzy is None else fuzzy
        fuzzy_tolerance = self.matcher.fuzzy_tolerance if tolerance is None else tolerance

        snapshot = self.store.sorted_entries(ascending=ascending)
        tier, matches = self.matcher.match(query, snapshot, fuzzy_enabled, fuzzy_tolerance)

        results = [
            SearchResult(**match.entry.model_dump(), distance=match.distance)
            for match in matches
        ]

        suggestions = None
        if tier == TIER_NONE and self.include_corrections:
            suggestions = self.matcher.suggest_corrections(query, snapshot)

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time
        self._stats["tier_hits"][tier] += 1

        logger.debug(
            "Search completed",
            query=query,
            tier=tier,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3)
        )

        return SearchResponse(
            query=query or "",
            tier=tier,
            fuzzy_enabled=fuzzy_enabled,
            fuzzy_tolerance=fuzzy_tolerance,
            total_results=len(results),
            results=results,
            suggestions=suggestions,
            execution_time_ms=execution_time
        )

    def suggest(self, query: str) -> List[TermEntry]:
        """Autocomplete suggestions over the A-Z snapshot."""
        self._stats["total_suggestions"] += 1
        return self.matcher.suggest(query, self.store.sorted_entries())

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()
        stats["tier_hits"] = dict(self._stats["tier_hits"])

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        stats["store_stats"] = self.store.get_stats()
        return stats

    def clear(self) -> None:
        """Clear all data and reset statistics."""
        self.store.clear()
        self._stats = self._empty_stats()
