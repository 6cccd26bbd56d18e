"""Internal constants for EasyTime.

The fixed UTC offset every conversion uses lives here and nowhere else.
This module is not part of the public API.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone

# The one offset all conversions are pinned to (UTC+08:00)
UTC_OFFSET_HOURS: int = 8

# Time unit conversions
MICROS_PER_MILLISECOND: int = 1_000
NANOS_PER_MICROSECOND: int = 1_000
FRACTION_DIGITS: int = 9  # nanosecond resolution of the "S" pattern letter

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

ONE_MILLISECOND: timedelta = timedelta(milliseconds=1)

# 1970-01-01 00:00:00 UTC
UNIX_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Field ranges accepted by the pattern parser (inclusive)
FIELD_RANGES: dict[str, tuple[int, int]] = {
    "year": (MINYEAR, MAXYEAR),
    "month": (1, 12),
    "day": (1, 31),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
}


__all__ = [
    "UTC_OFFSET_HOURS",
    "MICROS_PER_MILLISECOND",
    "NANOS_PER_MICROSECOND",
    "FRACTION_DIGITS",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "ONE_MILLISECOND",
    "UNIX_EPOCH",
    "FIELD_RANGES",
]
