"""Unit tests for text normalization."""

import pytest
from glossary_manager.core.normalizer import TextNormalizer, normalize, sort_key


class TestNormalize:
    """Test cases for the normalize function."""

    @pytest.fixture
    def samples(self):
        """Strings covering accents, case, ligatures and special casing."""
        return [
            "", "Algorithmus", "Café", "ÉCLAIR", "Überprüfung", "naïve façade",
            "İstanbul", "ℌello", "ﬁle", "Ǆemal", "Datenbank 2", "  spaced  ",
            "Straße", "ΟΔΥΣΣΕΥΣ", "ﬀ",
        ]

    def test_accent_insensitive(self):
        """Test that accents are stripped."""
        assert normalize("Café") == normalize("cafe")
        assert normalize("Überprüfung") == "uberprufung"

    def test_lower_cases(self):
        """Test that the result is lower-cased."""
        assert normalize("ALGORITHMUS") == "algorithmus"

    def test_none_is_empty(self):
        """Test that None is treated as the empty string."""
        assert normalize(None) == ""

    def test_empty_string(self):
        """Test that the empty string stays empty."""
        assert normalize("") == ""

    def test_non_string_is_coerced(self):
        """Test that non-string values are converted with str()."""
        assert normalize(42) == "42"

    def test_whitespace_is_kept(self):
        """Test that normalization does not trim."""
        assert normalize("  Café ") == "  cafe "

    def test_idempotent(self, samples):
        """Test normalize(normalize(s)) == normalize(s)."""
        for text in samples:
            once = normalize(text)
            assert normalize(once) == once, text

    def test_case_insensitive(self):
        """Test normalize(s) == normalize(s.upper())."""
        for text in [
            "Algorithmus", "café", "Éclair", "Datenbank 2", "naïve façade",
            "Straße", "Maß", "ὀδυσσεύς", "σοφός",
        ]:
            assert normalize(text) == normalize(text.upper())

    def test_special_casing_is_stable(self):
        """Test characters whose lower-casing or decomposition reintroduces marks or capitals."""
        assert normalize("İ") == "i"
        assert normalize("ℌ") == "h"

    def test_compatibility_decomposition(self):
        """Test that NFKD splits ligatures."""
        assert normalize("ﬁle") == "file"

    def test_sharp_s_matches_double_s(self):
        """Test that full case folding maps ß to ss."""
        assert normalize("Straße") == "strasse"
        assert normalize("STRASSE") == normalize("Straße")

    def test_final_sigma(self):
        assert normalize("ς") == normalize("Σ") == "σ"


class TestSortKey:
    """Test cases for the sort key."""

    def test_orders_by_canonical_form(self):
        terms = ["Zebra", "Éclair", "apfel"]
        assert sorted(terms, key=sort_key) == ["apfel", "Éclair", "Zebra"]

    def test_ignores_surrounding_whitespace(self):
        assert sort_key("  Café ") == "cafe"


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_normalize_delegates(self, normalizer):
        assert normalizer.normalize("Café") == "cafe"

    def test_sort_key(self, normalizer):
        assert normalizer.sort_key(" Éclair") == sort_key("Éclair")
