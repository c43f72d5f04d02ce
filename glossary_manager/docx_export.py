"""Word (.docx) export of the glossary, sorted A-Z."""

import io
from datetime import datetime
from typing import Iterable, List, Optional

from docx import Document
from docx.document import Document as DocumentObject

from .core.normalizer import sort_key
from .models.glossary import SourceReference, TermEntry

TITLE = "Glossar (A-Z)"
SOURCES_HEADING = "Quellenangaben"
GLOSSARY_COLUMNS = ["Begriff", "Definition", "Beispiel", "Quellen"]
SOURCE_COLUMNS = ["Quelle", "Beschreibung"]
FILENAME = "Glossar_A-Z.docx"


def _bold_paragraph(doc: DocumentObject, text: str) -> None:
    paragraph = doc.add_paragraph()
    paragraph.add_run(text).bold = True


def _add_table(doc: DocumentObject, header: List[str], rows: List[List[str]]) -> None:
    table = doc.add_table(rows=1, cols=len(header))
    table.style = "Table Grid"

    for cell, text in zip(table.rows[0].cells, header):
        cell.paragraphs[0].add_run(text).bold = True

    for values in rows:
        for cell, text in zip(table.add_row().cells, values):
            cell.text = text


def build_glossary_document(
    entries: Iterable[TermEntry],
    sources: Iterable[SourceReference],
    generated_at: Optional[datetime] = None
) -> DocumentObject:
    """
    Build the Word document.

    Layout: bold title, generation timestamp, glossary table sorted by
    canonical term, bold sources heading, sources table.
    """
    generated_at = generated_at or datetime.now()
    ordered = sorted(entries, key=lambda entry: sort_key(entry.term))

    doc = Document()
    _bold_paragraph(doc, TITLE)
    doc.add_paragraph(generated_at.strftime("%d.%m.%Y, %H:%M:%S"))
    doc.add_paragraph(" ")

    _add_table(doc, GLOSSARY_COLUMNS, [
        [entry.term, entry.definition, entry.example, "; ".join(entry.sources)]
        for entry in ordered
    ])

    doc.add_paragraph(" ")
    _bold_paragraph(doc, SOURCES_HEADING)
    doc.add_paragraph(" ")

    _add_table(doc, SOURCE_COLUMNS, [
        [source.label, source.description] for source in sources
    ])
    return doc


def export_glossary_docx(
    entries: Iterable[TermEntry],
    sources: Iterable[SourceReference],
    generated_at: Optional[datetime] = None
) -> bytes:
    """Render the glossary as .docx bytes."""
    doc = build_glossary_document(entries, sources, generated_at)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
