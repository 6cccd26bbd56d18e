"""The fixed UTC offset used by every conversion.

EasyTime pins all conversions to a single UTC offset with no timezone
database and no daylight-saving rules. The offset is built once from
``UTC_OFFSET_HOURS`` and shared as a standard ``datetime.timezone``.
"""

from __future__ import annotations

import re
from datetime import timedelta, timezone

from easytime._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, UTC_OFFSET_HOURS
from easytime.errors import ParseError

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$", re.ASCII)

# Largest offset datetime.timezone accepts is strictly less than 24 hours
_MAX_OFFSET_HOURS = 23


def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as ``+HH:MM``, or ``Z`` for UTC.

    Offsets with leftover seconds render as ``+HH:MM:SS``.

    Args:
        offset: Offset from UTC; positive values are east of UTC.

    Returns:
        String like "Z", "+08:00", "-05:30" or "+05:30:15".

    Examples:
        >>> format_offset(timedelta(hours=8))
        '+08:00'
        >>> format_offset(timedelta(0))
        'Z'
    """
    total_seconds = int(offset.total_seconds())
    if total_seconds == 0:
        return "Z"

    sign = "+" if total_seconds > 0 else "-"
    hours, remainder = divmod(abs(total_seconds), SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def parse_offset(s: str) -> timedelta:
    """Parse ``Z`` or ``+HH:MM`` into a UTC offset.

    Args:
        s: Offset string.

    Returns:
        The offset as a timedelta.

    Raises:
        ParseError: If the string is malformed or out of range.

    Examples:
        >>> parse_offset("+08:00")
        datetime.timedelta(seconds=28800)
        >>> parse_offset("Z")
        datetime.timedelta(0)
    """
    if s in ("Z", "z"):
        return timedelta(0)

    match = _OFFSET_RE.match(s)
    if not match:
        raise ParseError(f"cannot parse UTC offset: {s!r}")

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str)
    if hours > _MAX_OFFSET_HOURS or minutes > 59:
        raise ParseError(f"UTC offset out of range: {s!r}")

    seconds = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
    return timedelta(seconds=seconds if sign_str == "+" else -seconds)


FIXED_OFFSET: timezone = timezone(
    timedelta(hours=UTC_OFFSET_HOURS),
    "UTC" + format_offset(timedelta(hours=UTC_OFFSET_HOURS)),
)


__all__ = ["FIXED_OFFSET", "format_offset", "parse_offset"]
