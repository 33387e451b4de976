"""Clock — server-side timestamps for stored documents.

Invariants:
    - Always timezone-aware UTC; documents never carry naive datetimes

Design Decisions:
    - Own module so both entity models share one default_factory without importing each other
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
