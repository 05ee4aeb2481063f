"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime, time


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def as_utc_datetime(value: date | datetime) -> datetime:
    """Return a UTC-aware datetime for a date (midnight UTC) or datetime.

    Expedition dates arrive from forms as plain dates; expiration math
    works on datetimes.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)


def is_same_month(a: datetime, b: datetime) -> bool:
    """Return True when both datetimes fall in the same calendar month (UTC)."""
    a_utc = as_utc_datetime(a)
    b_utc = as_utc_datetime(b)
    return (a_utc.year, a_utc.month) == (b_utc.year, b_utc.month)


def from_timestamp_utc(timestamp: float) -> datetime:
    """Return a UTC-aware datetime for a Unix timestamp (e.g. file mtime)."""
    return datetime.fromtimestamp(timestamp, tz=UTC)
