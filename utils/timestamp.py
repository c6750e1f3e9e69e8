"""Millisecond timestamp utilities.

Identifier timestamps are integer milliseconds since the Unix epoch.
"""

import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

# Largest instant a datetime can hold, in epoch milliseconds
MAX_MILLIS = (datetime.max.replace(tzinfo=timezone.utc) - EPOCH) // ONE_MS


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_millis(value):
    """Convert a datetime (naive means UTC) or int milliseconds to epoch ms."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - EPOCH) // ONE_MS
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected datetime or int milliseconds, got {type(value).__name__}")
    return value


def from_millis(epoch_ms):
    """Aware UTC datetime for epoch milliseconds. Raises OverflowError past datetime.max."""
    if epoch_ms > MAX_MILLIS:
        raise OverflowError(f"{epoch_ms} ms is beyond the largest representable datetime")
    return EPOCH + timedelta(milliseconds=epoch_ms)


def format_millis(dt):
    """Format as ISO 8601 with milliseconds, e.g. 2024-09-11T17:51:46.274Z."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
