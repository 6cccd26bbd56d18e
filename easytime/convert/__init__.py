"""Time conversion functions.

This module converts between the three time representations, all at the
fixed +08:00 offset:
    - Instants (aware datetime), naive date-times and dates
    - Epoch-millisecond timestamps
    - Strings, via patterns

Examples:
    >>> from datetime import date
    >>> from easytime.convert import date_to_instant, instant_to_date
    >>> instant_to_date(date_to_instant(date(2024, 1, 15)))
    datetime.date(2024, 1, 15)
"""

from __future__ import annotations

from easytime.convert.epoch import (
    date_to_timestamp,
    datetime_to_timestamp,
    timestamp_to_date,
    timestamp_to_datetime,
)
from easytime.convert.instant import (
    date_to_instant,
    datetime_to_instant,
    instant_to_date,
    instant_to_datetime,
)
from easytime.convert.text import (
    instant_to_string,
    string_to_date,
    string_to_datetime,
    string_to_instant,
)

__all__ = [
    # Instant
    "instant_to_datetime",
    "datetime_to_instant",
    "date_to_instant",
    "instant_to_date",
    # Epoch
    "date_to_timestamp",
    "datetime_to_timestamp",
    "timestamp_to_date",
    "timestamp_to_datetime",
    # Text
    "instant_to_string",
    "string_to_datetime",
    "string_to_date",
    "string_to_instant",
]
