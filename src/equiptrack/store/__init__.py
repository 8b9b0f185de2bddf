"""Persistence of entries and settings.

Owns the read/write cycle against key-value slots:
- EntryStore: full-list load/save of equipment entries
- settings: fuel price
Forbidden: report arithmetic, CSV parsing
"""
