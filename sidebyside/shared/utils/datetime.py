"""
UTC time utilities.

Judgment timestamps are integer milliseconds since the Unix epoch.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def to_epoch_ms(dt: datetime) -> int:
    """
    Convert a datetime to milliseconds since the Unix epoch.

    Naive datetimes are assumed to be UTC.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        Integer epoch milliseconds
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)


def utc_now_ms() -> int:
    """Return the current time as epoch milliseconds."""
    return to_epoch_ms(utc_now())

