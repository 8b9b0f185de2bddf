"""API module for equiptrack.

HTTP layer:
- Validates inputs, reads/writes the entry store
- Returns payloads for UI
- Forbidden: report arithmetic or CSV parsing inline in routes
"""
