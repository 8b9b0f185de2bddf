"""CSV transfer API endpoints.

GET /api/entries/export - Download all entries as CSV
POST /api/entries/import - Replace all entries from an uploaded CSV
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from equiptrack.api.app import get_entry_store
from equiptrack.codec.csv_codec import from_csv, to_csv
from equiptrack.models.types import ImportResult
from equiptrack.store.entries import EntryStore

logger = logging.getLogger(__name__)

router = APIRouter()

EXPORT_FILENAME = "equipamentos.csv"


@router.get("/entries/export")
def export_entries(store: EntryStore = Depends(get_entry_store)) -> Response:
    """Export entries as a downloadable CSV file.

    Returns:
        CSV response with Content-Disposition header for download.
    """
    return Response(
        content=to_csv(store.entries),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.post("/entries/import", response_model=ImportResult)
def import_entries(
    file: UploadFile = File(...),
    store: EntryStore = Depends(get_entry_store),
) -> ImportResult:
    """Replace all entries with the rows of an uploaded CSV.

    Every imported row gets a new id. A file with fewer than two
    non-blank lines imports as an empty list.

    Raises:
        HTTPException: 400 if the file cannot be read as text; the
            stored entries are left unchanged.
    """
    try:
        text = file.file.read().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid CSV: {e}") from e

    entries = from_csv(text)
    store.replace_all(entries)
    logger.info(f"Imported {len(entries)} entries from {file.filename!r}")

    return ImportResult(imported=len(entries))
