"""Argument validation for EasyTime conversions.

Python's ``datetime`` is a subclass of ``date`` and carries its zone as an
optional attribute, so the three time types the library converts between
are told apart here rather than by the type system.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date, datetime

from easytime.errors import ValidationError


def require_instant(name: str, value: object) -> datetime:
    """Validate that a value is a timezone-aware datetime.

    Args:
        name: Parameter name used in the error message.
        value: The value to validate.

    Returns:
        The value, unchanged.

    Raises:
        ValidationError: If value is not a datetime or has no UTC offset.
    """
    if not isinstance(value, datetime):
        raise ValidationError(
            f"{name} must be a timezone-aware datetime, got {type(value).__name__}"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{name} must be timezone-aware, got naive {value!r}")
    return value


def require_naive_datetime(name: str, value: object) -> datetime:
    """Validate that a value is a naive datetime.

    Raises:
        ValidationError: If value is not a datetime or carries a timezone.
    """
    if not isinstance(value, datetime):
        raise ValidationError(
            f"{name} must be a naive datetime, got {type(value).__name__}"
        )
    if value.tzinfo is not None:
        raise ValidationError(f"{name} must be naive, got aware {value!r}")
    return value


def require_date(name: str, value: object) -> date:
    """Validate that a value is a plain date (not a datetime).

    Raises:
        ValidationError: If value is not a date, or is a datetime.
    """
    if isinstance(value, datetime) or not isinstance(value, date):
        raise ValidationError(f"{name} must be a date, got {type(value).__name__}")
    return value


def require_timestamp(name: str, value: object) -> int:
    """Validate that a value is an integer epoch-millisecond timestamp.

    Raises:
        ValidationError: If value is not an int (bool is rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer millisecond timestamp, "
            f"got {type(value).__name__}"
        )
    return value


__all__ = [
    "require_instant",
    "require_naive_datetime",
    "require_date",
    "require_timestamp",
]
