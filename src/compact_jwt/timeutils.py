"""Epoch timestamp arithmetic and date formatting helpers."""

import math
import time
from datetime import datetime, timedelta


def current_millis() -> float:
    """Return wall-clock time as epoch milliseconds."""
    return time.time() * 1000


def js_round(value: float) -> int:
    """Round half up, e.g. ``js_round(2.5) == 3`` and ``js_round(-2.5) == -2``.

    Python's built-in ``round`` uses banker's rounding, which would make
    ``iat``/``exp`` disagree with other HS256 implementations by one second.
    """
    return int(math.floor(value + 0.5))


def epoch_seconds(millis: float) -> int:
    """Convert epoch milliseconds to rounded epoch seconds."""
    return js_round(millis / 1000)


def add_days(millis: float, days: int) -> int:
    """Add calendar days in local time to ``millis`` and return epoch seconds.

    The wall-clock time of day is kept, so across a DST change the result is
    not a multiple of 86400 seconds away from the input.
    """
    start = datetime.fromtimestamp(millis / 1000)
    shifted = start + timedelta(days=days)
    return int(shifted.timestamp())


def timestamp_to_datetime(timestamp: float) -> str:
    """Render epoch seconds as local ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
