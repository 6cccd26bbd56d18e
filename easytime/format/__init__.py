"""Date/time patterns.

This module provides the pattern type used to format and parse strings,
and the three predefined patterns:
    - DAY_PATTERN: "yyyy-MM-dd"
    - MONTH_PATTERN: "yyyy-MM"
    - SECOND_PATTERN: "yyyy-MM-dd HH:mm:ss"

Examples:
    >>> from datetime import date
    >>> from easytime.format import DAY_PATTERN
    >>> DAY_PATTERN.format(date(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

from easytime.format.pattern import (
    DAY_PATTERN,
    MONTH_PATTERN,
    SECOND_PATTERN,
    DateTimePattern,
    ParsedFields,
    PatternLike,
)

__all__: list[str] = [
    "DateTimePattern",
    "ParsedFields",
    "PatternLike",
    "DAY_PATTERN",
    "MONTH_PATTERN",
    "SECOND_PATTERN",
]
