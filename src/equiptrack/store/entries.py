"""Entry store: the list of equipment entries and its persistence.

The whole list is serialized as one JSON array under a single slot.
Every mutation writes the full list back; the in-memory list is only
swapped after the write succeeded, so the last successful write wins.
"""

from __future__ import annotations

import json
import logging

from sqlalchemy.exc import SQLAlchemyError

from equiptrack.models.domain import EquipmentEntry
from equiptrack.store.slots import SlotStorage

logger = logging.getLogger(__name__)

ENTRIES_KEY = "equipamentos.base.v1"


class EntryNotFoundError(LookupError):
    """No entry with the given id."""


class DuplicateEntryError(ValueError):
    """An entry id appears more than once."""


class EntryStore:
    """In-memory entry list mirrored to one storage slot.

    Example:
        store = EntryStore(SlotStorage.from_path(db_path))
        store.load()
        store.add(entry)  # persisted immediately
    """

    def __init__(self, storage: SlotStorage, key: str = ENTRIES_KEY):
        self._storage = storage
        self._key = key
        self._entries: list[EquipmentEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[EquipmentEntry]:
        """Copy of the current entries, in stored order."""
        return list(self._entries)

    def load(self) -> list[EquipmentEntry]:
        """Load entries from storage.

        Missing, unreadable or corrupt data resets the store to an
        empty list; the failure is logged and not raised.

        Returns:
            The loaded entries.
        """
        self._entries = self._read_entries()
        logger.debug(f"Loaded {len(self._entries)} entries from slot {self._key!r}")
        return self.entries

    def _read_entries(self) -> list[EquipmentEntry]:
        try:
            raw = self._storage.read(self._key)
        except SQLAlchemyError as e:
            logger.warning(f"Could not read slot {self._key!r}, starting empty: {e}")
            return []

        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt data in slot {self._key!r}, starting empty: {e}")
            return []

        if not isinstance(parsed, list):
            logger.warning(f"Slot {self._key!r} does not hold a list, starting empty")
            return []

        entries = []
        for item in parsed:
            if not isinstance(item, dict):
                logger.warning(f"Skipping malformed stored entry: {item!r}")
                continue
            entries.append(EquipmentEntry.from_dict(item))
        return entries

    def get(self, entry_id: str) -> EquipmentEntry | None:
        """Get entry by id."""
        return next((e for e in self._entries if e.id == entry_id), None)

    def add(self, entry: EquipmentEntry) -> EquipmentEntry:
        """Append a new entry.

        Raises:
            DuplicateEntryError: If an entry with the same id exists.
        """
        if self.get(entry.id) is not None:
            raise DuplicateEntryError(f"Entry already exists: {entry.id}")
        self._commit([*self._entries, entry])
        return entry

    def update(self, entry: EquipmentEntry) -> EquipmentEntry:
        """Replace the entry with the same id.

        Raises:
            EntryNotFoundError: If no entry has this id.
        """
        if self.get(entry.id) is None:
            raise EntryNotFoundError(f"Entry not found: {entry.id}")
        self._commit([entry if e.id == entry.id else e for e in self._entries])
        return entry

    def delete(self, entry_id: str) -> None:
        """Remove the entry with this id.

        Raises:
            EntryNotFoundError: If no entry has this id.
        """
        if self.get(entry_id) is None:
            raise EntryNotFoundError(f"Entry not found: {entry_id}")
        self._commit([e for e in self._entries if e.id != entry_id])

    def replace_all(self, entries: list[EquipmentEntry]) -> None:
        """Replace the whole list, e.g. after a CSV import.

        Raises:
            DuplicateEntryError: If ids repeat within entries.
        """
        seen: set[str] = set()
        for entry in entries:
            if entry.id in seen:
                raise DuplicateEntryError(f"Duplicate entry id: {entry.id}")
            seen.add(entry.id)
        self._commit(list(entries))

    def _commit(self, entries: list[EquipmentEntry]) -> None:
        payload = json.dumps(
            [e.to_dict() for e in entries], ensure_ascii=False, allow_nan=False
        )
        self._storage.write(self._key, payload)
        self._entries = entries
        logger.debug(f"Saved {len(entries)} entries to slot {self._key!r}")
