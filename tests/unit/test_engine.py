"""Unit tests for the glossary engine."""

import pytest
from glossary_manager.core.engine import GlossaryEngine
from glossary_manager.models.glossary import TermEntry, default_document
from glossary_manager.models.response import SearchResponse


class TestGlossaryEngine:
    """Test cases for the GlossaryEngine class."""

    @pytest.fixture
    def engine(self):
        """Create an engine loaded with the default glossary."""
        engine = GlossaryEngine(fuzzy_enabled=True, fuzzy_tolerance=2)
        engine.load_document(default_document())
        return engine

    def test_engine_initialization(self):
        """Test engine defaults."""
        engine = GlossaryEngine()
        assert engine.matcher.fuzzy_enabled is True
        assert engine.matcher.fuzzy_tolerance == 2
        assert engine.matcher.suggestion_limit == 8
        assert engine.get_stats()["total_queries"] == 0

    def test_empty_query_lists_all(self, engine):
        """Test that an empty query returns every entry A-Z."""
        result = engine.search("")

        assert isinstance(result, SearchResponse)
        assert result.tier == "all"
        assert [r.term for r in result.results] == ["Algorithmus", "Datenbank"]

    def test_descending_order(self, engine):
        result = engine.search("", ascending=False)
        assert [r.term for r in result.results] == ["Datenbank", "Algorithmus"]

    def test_exact_search(self, engine):
        """Test exact match, case-insensitive."""
        result = engine.search("DATENBANK")

        assert result.tier == "exact"
        assert result.total_results == 1
        assert result.results[0].term == "Datenbank"
        assert result.results[0].distance is None
        assert result.suggestions is None

    def test_substring_search(self, engine):
        result = engine.search("bank")
        assert result.tier == "substring"
        assert [r.term for r in result.results] == ["Datenbank"]

    def test_fuzzy_search(self, engine):
        """Test fuzzy match with edit distance."""
        result = engine.search("Datenbnk")

        assert result.tier == "fuzzy"
        assert result.results[0].term == "Datenbank"
        assert result.results[0].distance == 1
        assert result.fuzzy_enabled is True
        assert result.fuzzy_tolerance == 2

    def test_fuzzy_disabled_returns_corrections(self, engine):
        """Test that a fruitless search offers similar terms."""
        result = engine.search("Datenbnk", fuzzy=False)

        assert result.tier == "none"
        assert result.results == []
        assert result.suggestions == ["Datenbank"]

    def test_tolerance_override(self, engine):
        result = engine.search("Datnbnk", tolerance=1)
        assert result.tier == "none"

        result = engine.search("Datnbnk", tolerance=2)
        assert result.tier == "fuzzy"

    def test_results_carry_entry_fields(self, engine):
        result = engine.search("Algorithmus")
        assert result.results[0].definition == "Schrittweise Anleitung zur Lösung eines Problems."

    def test_suggest(self, engine):
        engine.store.upsert(TermEntry(term="Datei"))
        suggestions = engine.suggest("dat")
        assert [s.term for s in suggestions] == ["Datei", "Datenbank"]

    def test_stats(self, engine):
        """Test per-tier statistics."""
        engine.search("Datenbank")
        engine.search("bank")
        engine.search("zzzzzzzz", fuzzy=False)
        engine.suggest("da")

        stats = engine.get_stats()
        assert stats["total_queries"] == 3
        assert stats["total_suggestions"] == 1
        assert stats["tier_hits"]["exact"] == 1
        assert stats["tier_hits"]["substring"] == 1
        assert stats["tier_hits"]["none"] == 1
        assert stats["average_execution_time_ms"] >= 0.0
        assert stats["store_stats"]["total_entries"] == 2

    def test_to_document(self, engine):
        document = engine.to_document()
        assert [e.term for e in document.entries] == ["Algorithmus", "Datenbank"]
        assert [s.label for s in document.sources] == ["Musterquelle 1"]

    def test_clear(self, engine):
        engine.search("Datenbank")
        engine.clear()
        assert engine.store.entries() == []
        assert engine.get_stats()["total_queries"] == 0
