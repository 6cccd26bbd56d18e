"""String conversions for instants, naive date-times and dates.

Every function takes a pattern, either a DateTimePattern or a pattern
string such as "yyyy-MM-dd". Parsing failures raise ParseError.

Functions:
    instant_to_string: Format an instant at +08:00.
    string_to_datetime: Parse a naive date-time.
    string_to_date: Parse a date.
    string_to_instant: Parse an instant, choosing the date or date-time
        path from the pattern.

Examples:
    >>> from easytime.format import MONTH_PATTERN
    >>> string_to_instant("2021-05", MONTH_PATTERN).isoformat()
    '2021-05-01T00:00:00+08:00'
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from easytime.convert.instant import date_to_instant, datetime_to_instant, instant_to_datetime
from easytime.format.pattern import (
    DAY_PATTERN,
    MONTH_PATTERN,
    SECOND_PATTERN,
    DateTimePattern,
    PatternLike,
)
from easytime.units.offset import FIXED_OFFSET

logger = logging.getLogger(__name__)

_DATE_PATH_PATTERNS: frozenset[str] = frozenset({str(DAY_PATTERN), str(MONTH_PATTERN)})
_DATETIME_PATH_PATTERNS: frozenset[str] = frozenset({str(SECOND_PATTERN)})


def instant_to_string(instant: datetime, pattern: PatternLike) -> str:
    """Format an instant with a pattern, at +08:00.

    Args:
        instant: A timezone-aware datetime, in any offset.
        pattern: The pattern to format with.

    Returns:
        The formatted string. An offset field renders as "+08:00".

    Raises:
        ValidationError: If instant is not an aware datetime.
        ValueError: If the pattern is invalid.

    Examples:
        >>> from datetime import timezone
        >>> instant_to_string(datetime(2024, 1, 15, 12, 30, tzinfo=timezone.utc), "yyyy-MM-dd HH:mm")
        '2024-01-15 20:30'
    """
    local = instant_to_datetime(instant)
    return DateTimePattern.of(pattern).format(local.replace(tzinfo=FIXED_OFFSET))


def string_to_datetime(text: str, pattern: PatternLike) -> datetime:
    """Parse a naive date-time.

    The pattern must have year, month and hour fields. A missing day
    defaults to 1; missing minute, second and fraction default to 0.

    Raises:
        ParseError: If text does not match the pattern, a field is out of
            range, or the pattern lacks a required field.
        ValueError: If the pattern is invalid.

    Examples:
        >>> string_to_datetime("2021-05-01 08:30:00", "yyyy-MM-dd HH:mm:ss")
        datetime.datetime(2021, 5, 1, 8, 30)
    """
    return DateTimePattern.of(pattern).parse(text).to_datetime()


def string_to_date(text: str, pattern: PatternLike) -> date:
    """Parse a date.

    The pattern must have year and month fields. A missing day defaults
    to 1; time fields are checked and then ignored.

    Raises:
        ParseError: If text does not match the pattern, a field is out of
            range, or the pattern lacks a required field.
        ValueError: If the pattern is invalid.

    Examples:
        >>> string_to_date("2021-05", "yyyy-MM")
        datetime.date(2021, 5, 1)
    """
    return DateTimePattern.of(pattern).parse(text).to_date()


def string_to_instant(text: str, pattern: PatternLike) -> datetime:
    """Parse an instant at +08:00.

    The parse path is picked by comparing the pattern text with the
    predefined patterns: DAY_PATTERN and MONTH_PATTERN parse a date and
    anchor it at the start of the day, SECOND_PATTERN parses a date-time.
    Any other pattern takes the date path, so its time fields are dropped.

    Raises:
        ParseError: If text does not match the pattern.
        ValueError: If the pattern is invalid.
    """
    key = str(pattern)
    if key in _DATETIME_PATH_PATTERNS:
        return datetime_to_instant(string_to_datetime(text, pattern))
    if key not in _DATE_PATH_PATTERNS:
        logger.debug("pattern %r is not predefined, parsing %r as a date", key, text)
    return date_to_instant(string_to_date(text, pattern))


__all__ = [
    "instant_to_string",
    "string_to_datetime",
    "string_to_date",
    "string_to_instant",
]
