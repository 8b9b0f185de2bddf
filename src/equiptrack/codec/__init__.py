"""Text codecs for equipment entries.

- csv_codec: canonical CSV export and lenient CSV import
Forbidden: storage access, report arithmetic
"""
