"""Glossary records shared by the engine, storage and API layers."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TermEntry(BaseModel):
    """A single glossary record."""

    model_config = ConfigDict(populate_by_name=True)

    term: str = Field(..., alias="begriff", description="The glossary term")
    definition: str = Field(default="", description="Definition of the term")
    example: str = Field(default="", alias="beispiel", description="Usage example")
    sources: List[str] = Field(
        default_factory=list, alias="quellen", description="Labels of cited sources"
    )

    @field_validator('term', 'definition', 'example', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing text as empty and trim surrounding whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator('sources', mode='before')
    @classmethod
    def coerce_sources(cls, v: Any) -> List[str]:
        """Drop blank source labels."""
        if v is None:
            return []
        return [str(label).strip() for label in v if label is not None and str(label).strip()]


class SourceReference(BaseModel):
    """A citation record that term entries refer to by label."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(..., alias="quelle", description="Unique source label")
    description: str = Field(default="", alias="beschreibung", description="Source description")

    @field_validator('label', 'description', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()


class GlossaryDocument(BaseModel):
    """Complete glossary state as persisted locally and in the cloud."""

    model_config = ConfigDict(populate_by_name=True)

    entries: List[TermEntry] = Field(default_factory=list, alias="glossar")
    sources: List[SourceReference] = Field(default_factory=list, alias="quellen")

    @field_validator('entries', 'sources', mode='before')
    @classmethod
    def coerce_list(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_payload(self) -> dict:
        """Serialize with the persisted field names."""
        return self.model_dump(by_alias=True)


DEFAULT_ENTRIES = [
    TermEntry(
        term="Algorithmus",
        definition="Schrittweise Anleitung zur Lösung eines Problems.",
        example="Ein Sortieralgorithmus ordnet Daten.",
    ),
    TermEntry(
        term="Datenbank",
        definition="System zur Speicherung und Verwaltung von Daten.",
        example="MySQL ist eine relationale Datenbank.",
    ),
]

DEFAULT_SOURCES = [
    SourceReference(label="Musterquelle 1", description="Buch, Artikel oder Website"),
]


def default_document() -> GlossaryDocument:
    """Seed document used when no stored glossary exists."""
    return GlossaryDocument(
        entries=[entry.model_copy(deep=True) for entry in DEFAULT_ENTRIES],
        sources=[source.model_copy() for source in DEFAULT_SOURCES],
    )
