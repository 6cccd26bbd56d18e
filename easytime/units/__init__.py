"""Temporal units.

This module provides:
    - FIXED_OFFSET: the UTC+08:00 tzinfo every conversion uses
    - format_offset / parse_offset: ``+HH:MM`` offset text
"""

from __future__ import annotations

from easytime.units.offset import FIXED_OFFSET, format_offset, parse_offset

__all__: list[str] = [
    "FIXED_OFFSET",
    "format_offset",
    "parse_offset",
]
