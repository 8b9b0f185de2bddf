"""Identity utilities for equipment entries.

Entry ids are opaque: callers must not derive meaning from them, and CSV
import always mints new ones.
"""

import uuid


def new_entry_id() -> str:
    """Generate a fresh entry id.

    Returns:
        Random UUID4 string (36 characters).
    """
    return str(uuid.uuid4())
