"""
Core Utilities.

Shared time helpers used across the package.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values stored by the application are timezone-naive
    and assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def now_millis() -> int:
    """Return the current instant as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def format_millis(value: int) -> str:
    """Render epoch milliseconds as a short local date-time string."""
    return datetime.fromtimestamp(value / 1000).strftime("%Y-%m-%d %H:%M")
