"""CSV import/export and Word export endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, Request, Response

from ..csv_codec import export_csv, parse_csv
from ..docx_export import FILENAME as DOCX_FILENAME
from ..docx_export import export_glossary_docx
from ..exceptions import CsvImportError
from ..models.response import ImportResponse

router = APIRouter(prefix="/api/v1", tags=["transfer"])
logger = structlog.get_logger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Import the global glossary engine instance
from ..engine_instance import glossary_engine
from .persistence import persist_or_fail


@router.get(
    "/export/csv",
    summary="Export CSV",
    description="Download all entries as CSV (Begriff, Definition, Beispiel, Quellen)"
)
async def download_csv() -> Response:
    content = export_csv(glossary_engine.store.entries())
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="Glossar.csv"'}
    )


@router.post(
    "/import/csv",
    response_model=ImportResponse,
    summary="Import CSV",
    description="Merge entries from a raw CSV request body; existing terms are replaced"
)
async def upload_csv(request: Request) -> ImportResponse:
    """
    Import entries from CSV.

    The body is the CSV text itself. A 'Begriff' (or 'Term') column is
    required; 'Definition', 'Beispiel' and 'Quellen' are optional.
    """
    raw = await request.body()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded")

    try:
        entries = parse_csv(text)
    except CsvImportError as e:
        raise HTTPException(status_code=400, detail=str(e))

    snapshot = glossary_engine.to_document()
    created, updated, skipped = glossary_engine.store.merge(entries)
    persist_or_fail(snapshot)
    logger.info("CSV imported", created=created, updated=updated, skipped=skipped)

    return ImportResponse(
        message="CSV imported successfully",
        created=created,
        updated=updated,
        skipped=skipped,
        total_entries=len(glossary_engine.store.entries())
    )


@router.get(
    "/export/docx",
    summary="Export Word document",
    description="Download the glossary (A-Z) and the source list as a .docx file"
)
def download_docx() -> Response:
    try:
        content = export_glossary_docx(
            glossary_engine.store.entries(),
            glossary_engine.store.list_sources()
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Word export failed: {str(e)}"
        )

    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOCX_FILENAME}"'}
    )
