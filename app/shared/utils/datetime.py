"""UTC datetime utilities.

Timestamps are written timezone-aware UTC; SQLite hands them back naive,
so read paths normalize with ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as UTC-aware: None stays None, naive is assumed UTC, aware is converted."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
