"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries so the store layer only sees
plain strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from equiptrack.db.schema import KeyValueSlot

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Slot Repository
# ============================================================================


def get_slot_value(session: DbSession, key: str) -> str | None:
    """Get the raw value stored under key, or None if the slot is empty."""
    slot = session.query(KeyValueSlot).filter(KeyValueSlot.key == key).first()
    return slot.value if slot else None


def put_slot_value(session: DbSession, key: str, value: str) -> None:
    """Create or overwrite the slot under key."""
    slot = session.query(KeyValueSlot).filter(KeyValueSlot.key == key).first()
    if slot:
        slot.value = value
    else:
        session.add(KeyValueSlot(key=key, value=value))


# ============================================================================
# Transaction Helpers
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit the current transaction."""
    session.commit()
