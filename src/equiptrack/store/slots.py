"""Key-value slot storage backed by the database.

Each read or write opens its own short session; callers never hold
a session across store operations.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.orm import sessionmaker

from equiptrack.db import repo
from equiptrack.db.session import get_session_factory, init_db


class SlotStorage:
    """Read and overwrite named text slots."""

    def __init__(self, session_factory: sessionmaker):
        """Initialize storage.

        Args:
            session_factory: Factory bound to an engine whose schema exists.
        """
        self._session_factory = session_factory

    @classmethod
    def from_path(cls, db_path: Path | None = None) -> SlotStorage:
        """Open (and create if needed) the SQLite database at db_path."""
        init_db(db_path)
        return cls(get_session_factory(db_path))

    def read(self, key: str) -> str | None:
        """Get the slot value, or None if nothing was written yet."""
        with self._session_factory() as session:
            return repo.get_slot_value(session, key)

    def write(self, key: str, value: str) -> None:
        """Overwrite the slot value and commit."""
        with self._session_factory() as session:
            repo.put_slot_value(session, key, value)
            repo.commit(session)
