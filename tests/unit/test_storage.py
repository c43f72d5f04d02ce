"""Unit tests for the JSON file repository."""

import json

import pytest
from glossary_manager.exceptions import StorageError
from glossary_manager.models.glossary import GlossaryDocument, SourceReference, TermEntry
from glossary_manager.storage import JsonGlossaryRepository


class TestJsonGlossaryRepository:
    """Test cases for the JsonGlossaryRepository class."""

    @pytest.fixture
    def repository(self, tmp_path):
        return JsonGlossaryRepository(str(tmp_path / "data" / "glossar.json"))

    def test_missing_file(self, repository):
        assert repository.exists() is False
        assert repository.load() is None

    def test_save_and_load(self, repository):
        """Test that a saved document loads back unchanged."""
        document = GlossaryDocument(
            entries=[TermEntry(term="Café", definition="Getränk", sources=["A"])],
            sources=[SourceReference(label="A", description="Buch")],
        )
        repository.save(document)

        assert repository.exists() is True
        assert repository.load() == document

    def test_persisted_field_names(self, repository):
        """Test the on-disk payload layout."""
        repository.save(GlossaryDocument(entries=[TermEntry(term="Café")]))

        with open(repository.path, encoding="utf-8") as f:
            payload = json.load(f)

        assert payload == {
            "glossar": [{"begriff": "Café", "definition": "", "beispiel": "", "quellen": []}],
            "quellen": [],
        }

    def test_malformed_file(self, repository, tmp_path):
        (tmp_path / "data").mkdir()
        with open(repository.path, "w", encoding="utf-8") as f:
            f.write("{not json")

        with pytest.raises(StorageError):
            repository.load()

    def test_wrong_shape(self, repository, tmp_path):
        (tmp_path / "data").mkdir()
        with open(repository.path, "w", encoding="utf-8") as f:
            json.dump({"glossar": [{"definition": "no term"}]}, f)

        with pytest.raises(StorageError):
            repository.load()

    def test_no_temp_files_left(self, repository, tmp_path):
        repository.save(GlossaryDocument())
        repository.save(GlossaryDocument())
        assert [p.name for p in (tmp_path / "data").iterdir()] == ["glossar.json"]
