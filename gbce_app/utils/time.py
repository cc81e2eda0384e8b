"""
Time handling for trade timestamps and trailing calculation windows.

Every function that needs "now" accepts it explicitly so callers and tests
can pin the reference instant; the wall clock is only a fallback.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from gbce_app.errors import InvalidTimestampError


def utc_now() -> datetime:
    """Current wall-clock time as a UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_reference_time(now: Optional[datetime] = None) -> datetime:
    """
    Resolve the reference instant for a calculation.

    Args:
        now: Explicit reference instant supplied by the caller

    Returns:
        The explicit instant when given, otherwise the current UTC time
    """
    if now is not None:
        return now

    return utc_now()


def ensure_utc(ts: datetime) -> datetime:
    """
    Convert a timezone-aware timestamp to UTC.

    Args:
        ts: Timestamp supplied by a caller

    Returns:
        The same instant expressed in UTC

    Raises:
        InvalidTimestampError: If the timestamp is naive
    """
    if ts.tzinfo is None or ts.utcoffset() is None:
        raise InvalidTimestampError(
            f"Trade timestamp {ts.isoformat()} has no timezone",
            timestamp=ts,
        )

    return ts.astimezone(timezone.utc)


def window_cutoff(now: datetime, minutes: int) -> datetime:
    """
    Start of a trailing window ending at now.

    Args:
        now: Reference instant closing the window
        minutes: Window length in minutes

    Returns:
        now minus the window length; timestamps must be strictly after it
    """
    return now - timedelta(minutes=minutes)


def format_timestamp(ts: datetime) -> str:
    """Format a trade timestamp as ISO8601 for logging and display."""
    return ts.isoformat()
