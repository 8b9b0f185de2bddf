"""Tests for identity utilities.

Invariants:
1. Entry ids are unique across calls
2. Entry ids are opaque strings
"""

import uuid

from equiptrack.core.identity import new_entry_id


class TestNewEntryId:
    """Tests for entry id generation."""

    def test_returns_uuid_string(self):
        """Ids parse as UUIDs."""
        entry_id = new_entry_id()
        assert isinstance(entry_id, str)
        assert str(uuid.UUID(entry_id)) == entry_id

    def test_unique(self):
        """Repeated calls never collide."""
        ids = {new_entry_id() for _ in range(1000)}
        assert len(ids) == 1000
