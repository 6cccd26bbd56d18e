"""EasyTime exception hierarchy.

All EasyTime-specific exceptions inherit from EasyTimeError. The concrete
errors also inherit from ValueError, so callers that already guard
conversions with ``except ValueError`` keep working.
"""

from __future__ import annotations


class EasyTimeError(Exception):
    """Base exception for all EasyTime errors."""

    pass


class ValidationError(EasyTimeError, ValueError):
    """Argument of the wrong kind for a conversion.

    Raised when a value cannot stand for the time type a conversion expects.

    Examples:
        - Naive datetime passed where an instant is expected
        - Aware datetime passed where a naive datetime is expected
        - datetime passed where a plain date is expected
        - Float passed as an epoch-millisecond timestamp
    """

    pass


class ParseError(EasyTimeError, ValueError):
    """Failed to parse a string with a pattern.

    Raised when a string does not match the pattern it is parsed with,
    or when a parsed field is out of range.

    Examples:
        - "2021/05/01" parsed with "yyyy-MM-dd"
        - Month value 13
        - Pattern without a month field used to parse a date
    """

    pass


__all__ = [
    "EasyTimeError",
    "ValidationError",
    "ParseError",
]
