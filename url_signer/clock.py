"""
Clocks
======
Time sources used to decide whether a signed URL has expired.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol, Union, runtime_checkable

from .exceptions import InvalidExpiration

Timestamp = Union[int, datetime]


@runtime_checkable
class Clock(Protocol):
    """
    Anything with a ``now()`` returning epoch seconds or a datetime.

    Float seconds (e.g. ``time.time()``) are accepted and truncated.
    """

    def now(self) -> Union[int, float, datetime]:
        ...


class SystemClock:
    """Wall-clock time. Reads the system time on every call."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock frozen at a given instant.

    Useful in tests and for verifying URLs against a reference time.
    """

    def __init__(self, at: Timestamp):
        self._at = to_unix_seconds(at)

    def now(self) -> int:
        return self._at

    def advance(self, seconds: Union[int, timedelta]) -> None:
        """Move the clock forward (or back, with a negative value)."""
        if isinstance(seconds, timedelta):
            seconds = int(seconds.total_seconds())
        self._at += seconds


def to_unix_seconds(value: Timestamp) -> int:
    """
    Normalize a timestamp to whole epoch seconds.

    Args:
        value: Epoch seconds or a datetime (naive datetimes are taken as UTC)

    Returns:
        Integer seconds since the epoch, sub-second precision truncated
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise InvalidExpiration(f"unsupported timestamp {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    raise InvalidExpiration(f"unsupported timestamp type {type(value).__name__}")
