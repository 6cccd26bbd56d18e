"""The TimeConversion utility class.

TimeConversion gathers every conversion as a static method, together with
the predefined patterns and the fixed offset, for callers that prefer a
single entry point over importing functions from ``easytime.convert``.
"""

from __future__ import annotations

from datetime import timezone
from typing import ClassVar

from easytime.arithmetic.month import first_moment_of_month, last_moment_of_month
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
from easytime.format.pattern import DAY_PATTERN, MONTH_PATTERN, SECOND_PATTERN, DateTimePattern
from easytime.units.offset import FIXED_OFFSET


class TimeConversion:
    """Stateless conversions between instants, date-times, dates, timestamps
    and strings, all at UTC+08:00.

    Attributes:
        OFFSET: The fixed offset every conversion uses.
        DAY_PATTERN: "yyyy-MM-dd".
        MONTH_PATTERN: "yyyy-MM".
        SECOND_PATTERN: "yyyy-MM-dd HH:mm:ss".

    Examples:
        >>> from datetime import date
        >>> TimeConversion.date_to_timestamp(date(2021, 5, 1))
        1619798400000
        >>> TimeConversion.string_to_instant("2021-05", TimeConversion.MONTH_PATTERN).isoformat()
        '2021-05-01T00:00:00+08:00'
    """

    OFFSET: ClassVar[timezone] = FIXED_OFFSET
    DAY_PATTERN: ClassVar[DateTimePattern] = DAY_PATTERN
    MONTH_PATTERN: ClassVar[DateTimePattern] = MONTH_PATTERN
    SECOND_PATTERN: ClassVar[DateTimePattern] = SECOND_PATTERN

    instant_to_datetime = staticmethod(instant_to_datetime)
    datetime_to_instant = staticmethod(datetime_to_instant)
    date_to_instant = staticmethod(date_to_instant)
    instant_to_date = staticmethod(instant_to_date)

    date_to_timestamp = staticmethod(date_to_timestamp)
    datetime_to_timestamp = staticmethod(datetime_to_timestamp)
    timestamp_to_date = staticmethod(timestamp_to_date)
    timestamp_to_datetime = staticmethod(timestamp_to_datetime)

    instant_to_string = staticmethod(instant_to_string)
    string_to_datetime = staticmethod(string_to_datetime)
    string_to_date = staticmethod(string_to_date)
    string_to_instant = staticmethod(string_to_instant)

    last_moment_of_month = staticmethod(last_moment_of_month)
    first_moment_of_month = staticmethod(first_moment_of_month)


__all__ = ["TimeConversion"]
