"""Epoch-millisecond conversions for dates and naive date-times.

Timestamps are integer milliseconds since 1970-01-01 00:00:00 UTC. Naive
values are read and written at FIXED_OFFSET, and a date stands for the
start of its day. Arithmetic stays in integers; instants before the epoch
floor toward negative infinity.

Functions:
    date_to_timestamp: Date to milliseconds at its start of day.
    datetime_to_timestamp: Naive date-time to milliseconds.
    timestamp_to_date: Milliseconds to calendar date.
    timestamp_to_datetime: Milliseconds to naive date-time.

Examples:
    >>> from datetime import datetime
    >>> datetime_to_timestamp(datetime(1970, 1, 1, 8, 0, 0))
    0

    >>> timestamp_to_datetime(0)
    datetime.datetime(1970, 1, 1, 8, 0)
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from easytime._internal.constants import ONE_MILLISECOND, UNIX_EPOCH, UTC_OFFSET_HOURS
from easytime._internal.validation import require_date, require_naive_datetime, require_timestamp
from easytime.units.offset import FIXED_OFFSET


def date_to_timestamp(value: date) -> int:
    """Convert a date to epoch milliseconds at 00:00:00 +08:00.

    Args:
        value: A plain date.

    Returns:
        Milliseconds since the Unix epoch.

    Raises:
        ValidationError: If value is not a plain date.

    Examples:
        >>> date_to_timestamp(date(1970, 1, 1))
        -28800000

        >>> date_to_timestamp(date(2021, 5, 1))
        1619798400000
    """
    require_date("value", value)
    return datetime_to_timestamp(datetime.combine(value, time.min))


def datetime_to_timestamp(value: datetime) -> int:
    """Convert a naive date-time at +08:00 to epoch milliseconds.

    Sub-millisecond digits are dropped (floored).

    Args:
        value: A naive datetime.

    Returns:
        Milliseconds since the Unix epoch.

    Raises:
        ValidationError: If value is not a naive datetime.
    """
    require_naive_datetime("value", value)
    return (value.replace(tzinfo=FIXED_OFFSET) - UNIX_EPOCH) // ONE_MILLISECOND


def timestamp_to_date(millis: int) -> date:
    """Return the calendar date at +08:00 of an epoch-millisecond timestamp.

    Raises:
        ValidationError: If millis is not an integer.
        OverflowError: If the timestamp is outside the supported years.

    Examples:
        >>> timestamp_to_date(1619798400000)
        datetime.date(2021, 5, 1)
    """
    return timestamp_to_datetime(millis).date()


def timestamp_to_datetime(millis: int) -> datetime:
    """Convert epoch milliseconds to a naive date-time at +08:00.

    Args:
        millis: Milliseconds since the Unix epoch.

    Returns:
        The wall-clock time at +08:00, without tzinfo.

    Raises:
        ValidationError: If millis is not an integer.
        OverflowError: If the timestamp is outside the supported years.
    """
    require_timestamp("millis", millis)
    # Naive arithmetic: the UTC instant of early year-1 values is not representable
    local_epoch = UNIX_EPOCH.replace(tzinfo=None) + timedelta(hours=UTC_OFFSET_HOURS)
    return local_epoch + timedelta(milliseconds=millis)


__all__ = [
    "date_to_timestamp",
    "datetime_to_timestamp",
    "timestamp_to_date",
    "timestamp_to_datetime",
]
