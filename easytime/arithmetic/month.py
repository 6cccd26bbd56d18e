"""Month boundary helpers.

Functions:
    first_moment_of_month: First day of the month at 00:00:00.
    last_moment_of_month: Last day of the month at the last representable
        time of day (23:59:59.999999).
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time

from easytime._internal.validation import require_date


def first_moment_of_month(value: date) -> datetime:
    """Return the first moment of the month containing a date.

    Raises:
        ValidationError: If value is not a plain date.

    Examples:
        >>> first_moment_of_month(date(2021, 2, 15))
        datetime.datetime(2021, 2, 1, 0, 0)
    """
    require_date("value", value)
    return datetime.combine(value.replace(day=1), time.min)


def last_moment_of_month(value: date) -> datetime:
    """Return the last moment of the month containing a date.

    Leap years are honored: February 2020 ends on the 29th.

    Raises:
        ValidationError: If value is not a plain date.

    Examples:
        >>> last_moment_of_month(date(2020, 2, 10))
        datetime.datetime(2020, 2, 29, 23, 59, 59, 999999)
    """
    require_date("value", value)
    last_day = calendar.monthrange(value.year, value.month)[1]
    return datetime.combine(value.replace(day=last_day), time.max)


__all__ = ["first_moment_of_month", "last_moment_of_month"]
