"""In-memory glossary store keyed on canonical terms."""

import time
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from ..models.glossary import GlossaryDocument, SourceReference, TermEntry
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


class CitationIndex:
    """Reverse index mapping source labels to the canonical terms citing them."""

    def __init__(self) -> None:
        """Initialize the citation index."""
        self._index: Dict[str, List[str]] = defaultdict(list)

    def add_entry(self, key: str, labels: List[str]) -> None:
        """
        Register the labels cited by an entry.

        Args:
            key: Canonical term of the entry
            labels: Source labels the entry refers to
        """
        for label in labels:
            if key not in self._index[label]:
                self._index[label].append(key)

    def remove_entry(self, key: str, labels: List[str]) -> None:
        """Forget the labels cited by an entry."""
        for label in labels:
            if label in self._index and key in self._index[label]:
                self._index[label].remove(key)

                # Remove label if no entries left
                if not self._index[label]:
                    del self._index[label]

    def get_keys(self, label: str) -> List[str]:
        """Canonical terms citing a label, in citation order."""
        if label in self._index:
            return self._index[label].copy()
        return []

    def get_all_labels(self) -> List[str]:
        """Every label cited by at least one entry."""
        return list(self._index.keys())

    def clear(self) -> None:
        self._index.clear()


class GlossaryStore:
    """
    Owns the term collection and the source list.

    Entries are unique on the canonical form of their term; an upsert with
    a colliding canonical term replaces the existing record in place.
    Sources are unique on their label.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._entries: Dict[str, TermEntry] = {}
        self._sources: Dict[str, SourceReference] = {}
        self.citations = CitationIndex()
        self.normalizer = TextNormalizer()
        self._stats = {
            "total_entries": 0,
            "total_sources": 0,
            "last_updated": None
        }

    def _touch(self) -> None:
        self._stats["total_entries"] = len(self._entries)
        self._stats["total_sources"] = len(self._sources)
        self._stats["last_updated"] = time.time()

    def key_for(self, term: str) -> str:
        """Canonical key for a term, ignoring surrounding whitespace."""
        return self.normalizer.normalize(term.strip())

    def upsert(self, entry: TermEntry) -> bool:
        """
        Insert or replace an entry.

        Args:
            entry: The entry to store

        Returns:
            True if stored, False if the term is blank
        """
        if not entry.term or not entry.term.strip():
            return False

        key = self.key_for(entry.term)
        previous = self._entries.get(key)
        if previous is not None:
            self.citations.remove_entry(key, previous.sources)

        self._entries[key] = entry
        self.citations.add_entry(key, entry.sources)
        self._touch()

        logger.debug("Entry stored", term=entry.term, replaced=previous is not None)
        return True

    def remove(self, term: str) -> bool:
        """
        Remove the entry whose canonical term matches ``term``.

        Returns:
            True if removed, False if not found
        """
        key = self.key_for(term)
        entry = self._entries.pop(key, None)
        if entry is None:
            return False

        self.citations.remove_entry(key, entry.sources)
        self._touch()
        return True

    def get(self, term: str) -> Optional[TermEntry]:
        return self._entries.get(self.key_for(term))

    def contains(self, term: str) -> bool:
        return self.key_for(term) in self._entries

    def entries(self) -> List[TermEntry]:
        """Entries in insertion order."""
        return list(self._entries.values())

    def sorted_entries(self, ascending: bool = True) -> List[TermEntry]:
        """Entries ordered by canonical term, A-Z or Z-A."""
        ordered = sorted(self._entries.values(), key=lambda entry: self.normalizer.sort_key(entry.term))
        if not ascending:
            ordered.reverse()
        return ordered

    def merge(self, entries: Iterable[TermEntry]) -> Tuple[int, int, int]:
        """
        Upsert entries in order.

        Returns:
            Tuple of (created, updated, skipped)
        """
        created = updated = skipped = 0
        for entry in entries:
            existed = bool(entry.term) and self.contains(entry.term)
            if not self.upsert(entry):
                skipped += 1
            elif existed:
                updated += 1
            else:
                created += 1
        return created, updated, skipped

    def add_source(self, source: SourceReference) -> bool:
        """
        Add a source, replacing the description of an existing label.

        Returns:
            True if stored, False if the label is blank
        """
        label = source.label.strip() if source.label else ""
        if not label:
            return False

        self._sources[label] = source
        self._touch()
        return True

    def remove_source(self, label: str) -> bool:
        """Remove a source by label; entries citing it keep the dangling label."""
        if label in self._sources:
            del self._sources[label]
            self._touch()
            return True
        return False

    def list_sources(self) -> List[SourceReference]:
        return list(self._sources.values())

    def terms_citing(self, label: str) -> List[str]:
        """Display terms of every entry citing ``label``."""
        return [self._entries[key].term for key in self.citations.get_keys(label)]

    def replace_all(
        self,
        entries: Iterable[TermEntry],
        sources: Iterable[SourceReference]
    ) -> None:
        """Replace the whole collection, later duplicates win."""
        self.clear()
        for entry in entries:
            self.upsert(entry)
        for source in sources:
            self.add_source(source)
        self._touch()

    def load_document(self, document: GlossaryDocument) -> None:
        self.replace_all(document.entries, document.sources)

    def to_document(self) -> GlossaryDocument:
        return GlossaryDocument(entries=self.entries(), sources=self.list_sources())

    def clear(self) -> None:
        """Clear all entries and sources."""
        self._entries.clear()
        self._sources.clear()
        self.citations.clear()
        self._stats = {
            "total_entries": 0,
            "total_sources": 0,
            "last_updated": None
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        stats = self._stats.copy()
        stats["cited_labels"] = len(self.citations.get_all_labels())
        return stats
