"""Instant constants and coercion helpers for timerange.

Instants are timezone-aware datetimes. Their finest step is one microsecond.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Literal, TypeAlias

from dateutil.parser import isoparse

# Step constants
MICROSECOND = timedelta(microseconds=1)
SECOND = timedelta(seconds=1)

# Unix epoch and the zero-valued placeholder instant
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ZERO = datetime.min.replace(tzinfo=timezone.utc)

InstantLike: TypeAlias = datetime | date | int | float | str


def coerce_instant(
    value: Any, edge: Literal["start", "end"] = "start"
) -> datetime:
    """Convert an endpoint value to a timezone-aware datetime.

    Accepts:
    - datetime: Must be timezone-aware, passed through as-is
    - date: Start of day (for "start") or end of day (for "end") in UTC
    - int/float: Unix timestamp in seconds, interpreted in UTC
    - str: ISO-8601 text carrying a UTC offset

    Raises:
        TypeError: If value is an unsupported type or lacks timezone info
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Range {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value
    if isinstance(value, date):
        clock = time.min if edge == "start" else time.max
        return datetime.combine(value, clock, tzinfo=timezone.utc)
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return EPOCH + timedelta(seconds=value)
    if isinstance(value, str):
        parsed = isoparse(value)
        if parsed.tzinfo is None:
            raise TypeError(
                f"Range {edge} string must carry a UTC offset.\n"
                f"Got: {value!r}\n"
                f"Hint: Append an offset, e.g. {value + 'Z'!r} or "
                f"{value + '+00:00'!r}"
            )
        return parsed
    raise TypeError(
        f"Range {edge} must be datetime, date, int, float, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  new_range(datetime(2025,1,1,tzinfo=timezone.utc), ...)  "
        f"# timezone-aware datetime\n"
        f"  new_range(1735689600, 1735693200)  # int (Unix seconds)\n"
        f"  new_range('2025-01-01T00:00:00Z', ...)  # ISO-8601 string"
    )
