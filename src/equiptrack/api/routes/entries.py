"""Entries API endpoints.

GET /api/entries - List entries
GET /api/entries/{entry_id} - Get one entry
POST /api/entries - Create entry
PUT /api/entries/{entry_id} - Replace entry
DELETE /api/entries/{entry_id} - Delete entry
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from equiptrack.api.app import get_entry_store
from equiptrack.core.identity import new_entry_id
from equiptrack.models.types import EntryDetail, EntryInput
from equiptrack.store.entries import DuplicateEntryError, EntryNotFoundError, EntryStore

router = APIRouter()


@router.get("/entries", response_model=list[EntryDetail])
def list_entries(store: EntryStore = Depends(get_entry_store)) -> list[EntryDetail]:
    """List all entries in stored order."""
    return [EntryDetail.from_entry(e) for e in store.entries]


@router.get("/entries/{entry_id}", response_model=EntryDetail)
def get_entry(
    entry_id: str,
    store: EntryStore = Depends(get_entry_store),
) -> EntryDetail:
    """Get one entry.

    Raises:
        HTTPException: 404 if entry not found.
    """
    entry = store.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return EntryDetail.from_entry(entry)


@router.post("/entries", response_model=EntryDetail, status_code=201)
def create_entry(
    payload: EntryInput,
    store: EntryStore = Depends(get_entry_store),
) -> EntryDetail:
    """Create an entry with a fresh id.

    Raises:
        HTTPException: 409 if the generated id collides.
    """
    try:
        entry = store.add(payload.to_entry(new_entry_id()))
    except DuplicateEntryError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return EntryDetail.from_entry(entry)


@router.put("/entries/{entry_id}", response_model=EntryDetail)
def replace_entry(
    entry_id: str,
    payload: EntryInput,
    store: EntryStore = Depends(get_entry_store),
) -> EntryDetail:
    """Replace every field of an existing entry; the id is kept.

    Raises:
        HTTPException: 404 if entry not found.
    """
    try:
        entry = store.update(payload.to_entry(entry_id))
    except EntryNotFoundError as e:
        raise HTTPException(status_code=404, detail="Entry not found") from e
    return EntryDetail.from_entry(entry)


@router.delete("/entries/{entry_id}", status_code=204)
def delete_entry(
    entry_id: str,
    store: EntryStore = Depends(get_entry_store),
) -> Response:
    """Delete an entry.

    Raises:
        HTTPException: 404 if entry not found.
    """
    try:
        store.delete(entry_id)
    except EntryNotFoundError as e:
        raise HTTPException(status_code=404, detail="Entry not found") from e
    return Response(status_code=204)
