"""EasyTime: conversions between instants, date-times and dates at UTC+08:00.

EasyTime converts between three time representations, epoch-millisecond
timestamps and formatted strings. Every conversion is pinned to the fixed
offset UTC+08:00; no timezone database or daylight-saving rule is used.

Time Types:
    Instant: timezone-aware datetime (millisecond precision)
    Naive date-time: datetime without tzinfo, read at +08:00
    Date: date, anchored at 00:00:00 +08:00

Patterns:
    DateTimePattern: "yyyy-MM-dd HH:mm:ss"-style format/parse pattern
    DAY_PATTERN, MONTH_PATTERN, SECOND_PATTERN: predefined patterns

Exceptions:
    EasyTimeError: Base exception
    ValidationError: Argument of the wrong time type
    ParseError: String does not match its pattern

Example:
    >>> from datetime import date
    >>> from easytime import TimeConversion, SECOND_PATTERN
    >>> instant = TimeConversion.date_to_instant(date(2024, 1, 15))
    >>> TimeConversion.instant_to_string(instant, SECOND_PATTERN)
    '2024-01-15 00:00:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Utility class
from easytime.conversion import TimeConversion

# Conversion functions
from easytime.arithmetic import first_moment_of_month, last_moment_of_month
from easytime.convert import (
    date_to_instant,
    date_to_timestamp,
    datetime_to_instant,
    datetime_to_timestamp,
    instant_to_date,
    instant_to_datetime,
    instant_to_string,
    string_to_date,
    string_to_datetime,
    string_to_instant,
    timestamp_to_date,
    timestamp_to_datetime,
)

# Patterns and offset
from easytime.format import DAY_PATTERN, MONTH_PATTERN, SECOND_PATTERN, DateTimePattern
from easytime.units import FIXED_OFFSET

# Exceptions
from easytime.errors import EasyTimeError, ParseError, ValidationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Utility class
    "TimeConversion",
    # Conversion functions
    "instant_to_datetime",
    "datetime_to_instant",
    "date_to_instant",
    "instant_to_date",
    "date_to_timestamp",
    "datetime_to_timestamp",
    "timestamp_to_date",
    "timestamp_to_datetime",
    "instant_to_string",
    "string_to_datetime",
    "string_to_date",
    "string_to_instant",
    "last_moment_of_month",
    "first_moment_of_month",
    # Patterns and offset
    "DateTimePattern",
    "DAY_PATTERN",
    "MONTH_PATTERN",
    "SECOND_PATTERN",
    "FIXED_OFFSET",
    # Exceptions
    "EasyTimeError",
    "ValidationError",
    "ParseError",
]
