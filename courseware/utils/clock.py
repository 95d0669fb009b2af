"""
Time helpers

All timestamps are stored as naive UTC so SQLite and PostgreSQL round-trip
them identically.
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time without tzinfo"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
