"""CSV import and export of glossary entries."""

import csv
import io
import re
from typing import Iterable, List, Optional

import structlog

from .exceptions import CsvImportError
from .models.glossary import TermEntry

logger = structlog.get_logger(__name__)

EXPORT_HEADER = ["Begriff", "Definition", "Beispiel", "Quellen"]
SOURCE_JOINER = "; "
SOURCE_SPLITTER = re.compile(r"[;|,]")

# Accepted header names per field, compared lower-cased
COLUMN_ALIASES = {
    "term": ("begriff", "term"),
    "definition": ("definition",),
    "example": ("beispiel", "example"),
    "sources": ("quellen", "sources"),
}


def export_csv(entries: Iterable[TermEntry]) -> str:
    """
    Render entries as CSV text.

    Args:
        entries: Entries in the order they should appear

    Returns:
        CSV text with a header row, sources joined by "; "
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for entry in entries:
        writer.writerow([
            entry.term,
            entry.definition,
            entry.example,
            SOURCE_JOINER.join(entry.sources),
        ])
    return buffer.getvalue()


def split_sources(cell: str) -> List[str]:
    """Split a sources cell on ';', '|' or ',' and drop blanks."""
    return [label.strip() for label in SOURCE_SPLITTER.split(cell or "") if label.strip()]


def _find_column(header: List[str], field: str) -> Optional[int]:
    for alias in COLUMN_ALIASES[field]:
        if alias in header:
            return header.index(alias)
    return None


def _cell(row: List[str], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index]


def parse_csv(text: str) -> List[TermEntry]:
    """
    Parse CSV text into entries.

    The first row is the header; columns are located by name. A term column
    is required, the others are optional. Blank rows are skipped; rows with a
    blank term are kept so the caller can count them as skipped.

    Raises:
        CsvImportError: If the header has no term column
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text))
    try:
        header = next(reader)
    except StopIteration:
        header = []
    except csv.Error as e:
        raise CsvImportError(f"Malformed CSV header: {e}") from e

    columns = [name.strip().lower() for name in header]
    term_idx = _find_column(columns, "term")
    if term_idx is None:
        raise CsvImportError("CSV needs a 'Begriff' column")

    definition_idx = _find_column(columns, "definition")
    example_idx = _find_column(columns, "example")
    sources_idx = _find_column(columns, "sources")

    entries = []
    try:
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            entries.append(TermEntry(
                term=_cell(row, term_idx),
                definition=_cell(row, definition_idx),
                example=_cell(row, example_idx),
                sources=split_sources(_cell(row, sources_idx)),
            ))
    except csv.Error as e:
        raise CsvImportError(f"Malformed CSV at line {reader.line_num}: {e}") from e

    logger.debug("CSV parsed", total_rows=len(entries))
    return entries
