"""Conversions between instants, naive date-times and dates.

An instant is a timezone-aware ``datetime``; the instants this module
creates carry ``FIXED_OFFSET`` and millisecond precision. Naive values
are always read and written at ``FIXED_OFFSET``.

Functions:
    instant_to_datetime: Instant to naive date-time at +08:00.
    datetime_to_instant: Naive date-time at +08:00 to instant.
    date_to_instant: Date to the instant of its start of day at +08:00.
    instant_to_date: Instant to its calendar date at +08:00.

Examples:
    >>> from datetime import datetime, timezone
    >>> instant_to_datetime(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))
    datetime.datetime(2024, 1, 15, 20, 0)
"""

from __future__ import annotations

from datetime import date, datetime, time

from easytime._internal.constants import MICROS_PER_MILLISECOND
from easytime._internal.validation import require_date, require_instant, require_naive_datetime
from easytime.units.offset import FIXED_OFFSET


def instant_to_datetime(instant: datetime) -> datetime:
    """Convert an instant to a naive date-time at +08:00.

    Args:
        instant: A timezone-aware datetime, in any offset.

    Returns:
        The wall-clock time at +08:00, without tzinfo.

    Raises:
        ValidationError: If instant is not an aware datetime.
    """
    require_instant("instant", instant)
    return instant.astimezone(FIXED_OFFSET).replace(tzinfo=None)


def datetime_to_instant(value: datetime) -> datetime:
    """Convert a naive date-time at +08:00 to an instant.

    Sub-millisecond digits are truncated.

    Args:
        value: A naive datetime.

    Returns:
        An aware datetime carrying FIXED_OFFSET.

    Raises:
        ValidationError: If value is not a naive datetime.

    Examples:
        >>> datetime_to_instant(datetime(2021, 5, 1, 8, 30)).isoformat()
        '2021-05-01T08:30:00+08:00'
    """
    require_naive_datetime("value", value)
    millis_only = value.microsecond - value.microsecond % MICROS_PER_MILLISECOND
    return value.replace(microsecond=millis_only, tzinfo=FIXED_OFFSET)


def date_to_instant(value: date) -> datetime:
    """Convert a date to the instant its day starts at +08:00.

    Raises:
        ValidationError: If value is not a plain date.

    Examples:
        >>> date_to_instant(date(2021, 5, 1)).isoformat()
        '2021-05-01T00:00:00+08:00'
    """
    require_date("value", value)
    return datetime.combine(value, time.min, tzinfo=FIXED_OFFSET)


def instant_to_date(instant: datetime) -> date:
    """Return the calendar date of an instant at +08:00.

    Raises:
        ValidationError: If instant is not an aware datetime.
    """
    return instant_to_datetime(instant).date()


__all__ = [
    "instant_to_datetime",
    "datetime_to_instant",
    "date_to_instant",
    "instant_to_date",
]
