"""Date/time patterns for formatting and parsing.

A pattern is a string of field letters, quoted literals and plain
characters, in the familiar ``yyyy-MM-dd HH:mm:ss`` style. Patterns are
compiled once per pattern text and reused.

Supported Letters:
    yyyy, uuuu - 4-digit year (0001-9999)
    M, MM      - Month (1-12), unpadded or 2 digits
    d, dd      - Day of month (1-31), unpadded or 2 digits
    H, HH      - Hour of day (0-23), unpadded or 2 digits
    m, mm      - Minute (0-59), unpadded or 2 digits
    s, ss      - Second (0-59), unpadded or 2 digits
    S..S       - Fraction of second, 1 to 9 digits
    XXX        - UTC offset ("Z" or "+08:00")
    'text'     - Quoted literal; '' is a single quote

Parsing is strict about the shape of the text and lenient about the day
of month: a day past the end of the month resolves to the month's last
day, so "2021-02-30" parses as 2021-02-28.

Examples:
    >>> from datetime import datetime
    >>> pattern = DateTimePattern("yyyy-MM-dd HH:mm:ss")
    >>> pattern.format(datetime(2024, 1, 15, 14, 30, 45))
    '2024-01-15 14:30:45'

    >>> pattern.parse("2024-01-15 14:30:45").to_datetime()
    datetime.datetime(2024, 1, 15, 14, 30, 45)
"""

from __future__ import annotations

import calendar
import functools
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import NamedTuple, Union

from easytime._internal.constants import FIELD_RANGES, FRACTION_DIGITS, NANOS_PER_MICROSECOND
from easytime.errors import ParseError
from easytime.units.offset import format_offset, parse_offset

# Anything a caller may pass where a pattern is expected
PatternLike = Union["DateTimePattern", str]

_LETTER_FIELDS: dict[str, str] = {
    "y": "year",
    "u": "year",
    "M": "month",
    "d": "day",
    "H": "hour",
    "m": "minute",
    "s": "second",
    "S": "fraction",
    "X": "offset",
}

_FIELD_WIDTHS: dict[str, tuple[int, ...]] = {
    "year": (4,),
    "month": (1, 2),
    "day": (1, 2),
    "hour": (1, 2),
    "minute": (1, 2),
    "second": (1, 2),
    "fraction": tuple(range(1, FRACTION_DIGITS + 1)),
    "offset": (3,),
}


class _Token(NamedTuple):
    field: str  # field name, or "" for a literal
    width: int
    text: str


@dataclass(frozen=True)
class ParsedFields:
    """Field values read from a string by DateTimePattern.parse.

    Fields absent from the pattern are None. Values are already
    range-checked; resolving them into a date or datetime applies the
    defaults for missing fields.
    """

    text: str
    pattern: str
    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None
    offset: timedelta | None = None

    def to_date(self) -> date:
        """Resolve to a date.

        Year and month are required. A missing day defaults to 1, and a
        day past the end of the month resolves to the last day.

        Raises:
            ParseError: If the pattern has no year or no month field.
        """
        if self.year is None or self.month is None:
            raise ParseError(
                f"cannot resolve a date from {self.text!r}: pattern "
                f"{self.pattern!r} needs year and month fields"
            )
        day = 1 if self.day is None else self.day
        last_day = calendar.monthrange(self.year, self.month)[1]
        return date(self.year, self.month, min(day, last_day))

    def to_datetime(self) -> datetime:
        """Resolve to a naive datetime.

        Date fields resolve as in to_date. The hour is required; minute,
        second and fraction default to 0. A parsed offset is not applied.

        Raises:
            ParseError: If a required field is missing from the pattern.
        """
        resolved = self.to_date()
        if self.hour is None:
            raise ParseError(
                f"cannot resolve a date-time from {self.text!r}: pattern "
                f"{self.pattern!r} needs an hour field"
            )
        return datetime(
            resolved.year,
            resolved.month,
            resolved.day,
            self.hour,
            self.minute or 0,
            self.second or 0,
            self.microsecond or 0,
        )


class DateTimePattern:
    """A compiled date/time pattern.

    Two patterns are equal when their pattern texts are equal, and
    ``str()`` returns the pattern text.

    Attributes:
        pattern: The pattern text this object was compiled from.

    Examples:
        >>> DateTimePattern("yyyy-MM") == DateTimePattern.of("yyyy-MM")
        True
        >>> str(DateTimePattern("yyyy-MM-dd"))
        'yyyy-MM-dd'
    """

    __slots__ = ("_pattern", "_tokens", "_regex")

    def __init__(self, pattern: str) -> None:
        """Compile a pattern string.

        Args:
            pattern: The pattern text.

        Raises:
            TypeError: If pattern is not a string.
            ValueError: If the pattern uses an unsupported letter, letter
                count, repeats a field, or has an unterminated quote.
        """
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")

        self._pattern: str = pattern
        self._tokens: tuple[_Token, ...] = _tokenize(pattern)
        self._regex: re.Pattern[str] = re.compile(_tokens_to_regex(self._tokens), re.ASCII)

    @classmethod
    def of(cls, pattern: PatternLike) -> DateTimePattern:
        """Return a compiled pattern for a pattern or pattern text.

        Pattern texts are compiled once and cached.

        Raises:
            TypeError: If pattern is neither a DateTimePattern nor a string.
        """
        if isinstance(pattern, DateTimePattern):
            return pattern
        if isinstance(pattern, str):
            return _compile(pattern)
        raise TypeError(
            f"pattern must be a DateTimePattern or string, got {type(pattern).__name__}"
        )

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def fields(self) -> frozenset[str]:
        """Names of the fields this pattern reads and writes."""
        return frozenset(token.field for token in self._tokens if token.field)

    def format(self, value: date | datetime) -> str:
        """Format a date or datetime with this pattern.

        Args:
            value: A date, naive datetime or aware datetime.

        Returns:
            Formatted string.

        Raises:
            ValueError: If the pattern needs a field the value lacks, such
                as an hour for a date or an offset for a naive datetime.
        """
        return "".join(
            token.text if not token.field else _format_field(value, token)
            for token in self._tokens
        )

    def parse(self, text: str) -> ParsedFields:
        """Read field values from a string.

        Args:
            text: The string to parse; it must match the whole pattern.

        Returns:
            The parsed, range-checked fields.

        Raises:
            ParseError: If text does not match the pattern or a field is
                out of range.
        """
        if not isinstance(text, str):
            raise ParseError(f"expected a string to parse, got {type(text).__name__}")

        match = self._regex.fullmatch(text)
        if match is None:
            raise ParseError(f"text {text!r} does not match pattern {self._pattern!r}")

        values: dict[str, object] = {}
        for name, raw in match.groupdict().items():
            if name == "fraction":
                values["microsecond"] = int(raw.ljust(FRACTION_DIGITS, "0")) // NANOS_PER_MICROSECOND
            elif name == "offset":
                values["offset"] = parse_offset(raw)
            else:
                number = int(raw)
                low, high = FIELD_RANGES[name]
                if number < low or number > high:
                    raise ParseError(
                        f"cannot parse {text!r}: {name} must be between "
                        f"{low} and {high}, got {number}"
                    )
                values[name] = number

        return ParsedFields(text=text, pattern=self._pattern, **values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimePattern):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f"DateTimePattern({self._pattern!r})"

    def __str__(self) -> str:
        return self._pattern


@functools.lru_cache(maxsize=128)
def _compile(pattern: str) -> DateTimePattern:
    return DateTimePattern(pattern)


def _tokenize(pattern: str) -> tuple[_Token, ...]:
    """Split a pattern into field and literal tokens.

    Raises:
        ValueError: If the pattern is malformed.
    """
    tokens: list[_Token] = []
    seen: set[str] = set()
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                tokens.append(_Token("", 0, "'"))
                i += 2
                continue
            literal, i = _read_quoted(pattern, i)
            tokens.append(_Token("", 0, literal))
        elif ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            count = j - i
            field = _LETTER_FIELDS.get(ch)
            if field is None:
                raise ValueError(
                    f"unsupported pattern letter {ch!r} in {pattern!r}. "
                    f"Supported: y, u, M, d, H, m, s, S, X"
                )
            if count not in _FIELD_WIDTHS[field]:
                raise ValueError(
                    f"unsupported letter count {ch * count!r} for {field} in {pattern!r}"
                )
            if field in seen:
                raise ValueError(f"field {field} appears more than once in {pattern!r}")
            seen.add(field)
            tokens.append(_Token(field, count, ""))
            i = j
        else:
            tokens.append(_Token("", 0, ch))
            i += 1

    return tuple(tokens)


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at the opening quote.

    Returns:
        The literal text and the index just past the closing quote.
    """
    chars: list[str] = []
    i = start + 1
    while i < len(pattern):
        if pattern[i] == "'":
            if pattern.startswith("''", i):
                chars.append("'")
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(pattern[i])
        i += 1
    raise ValueError(f"unterminated quoted literal in pattern {pattern!r}")


def _tokens_to_regex(tokens: tuple[_Token, ...]) -> str:
    result = []
    for token in tokens:
        if not token.field:
            result.append(re.escape(token.text))
        elif token.field == "year":
            result.append(r"(?P<year>\d{4})")
        elif token.field == "fraction":
            result.append(rf"(?P<fraction>\d{{{token.width}}})")
        elif token.field == "offset":
            result.append(r"(?P<offset>Z|[+-]\d{2}:\d{2})")
        elif token.width == 1:
            result.append(rf"(?P<{token.field}>\d{{1,2}})")
        else:
            result.append(rf"(?P<{token.field}>\d{{2}})")
    return "".join(result)


def _format_field(value: date | datetime, token: _Token) -> str:
    field = token.field

    if field == "fraction":
        microsecond = getattr(value, "microsecond", None)
        if microsecond is None:
            raise ValueError(f"pattern needs a fraction, but {type(value).__name__} has no time")
        return f"{microsecond * NANOS_PER_MICROSECOND:09d}"[: token.width]

    if field == "offset":
        offset = value.utcoffset() if isinstance(value, datetime) else None
        if offset is None:
            raise ValueError(
                f"pattern needs an offset, but {type(value).__name__} {value!r} is not aware"
            )
        return format_offset(offset)

    number = getattr(value, field, None)
    if number is None:
        raise ValueError(f"pattern needs {field}, but {type(value).__name__} has no {field}")
    if field == "year":
        return f"{number:04d}"
    if token.width == 1:
        return str(number)
    return f"{number:02d}"


# Predefined patterns: day, month and second precision
DAY_PATTERN: DateTimePattern = DateTimePattern("yyyy-MM-dd")
MONTH_PATTERN: DateTimePattern = DateTimePattern("yyyy-MM")
SECOND_PATTERN: DateTimePattern = DateTimePattern("yyyy-MM-dd HH:mm:ss")


__all__ = [
    "DateTimePattern",
    "ParsedFields",
    "PatternLike",
    "DAY_PATTERN",
    "MONTH_PATTERN",
    "SECOND_PATTERN",
]
