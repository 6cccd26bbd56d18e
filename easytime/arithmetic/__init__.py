"""Calendar arithmetic.

This module provides:
    - first_moment_of_month: Start of the month containing a date
    - last_moment_of_month: End of the month containing a date
"""

from __future__ import annotations

from easytime.arithmetic.month import first_moment_of_month, last_moment_of_month

__all__: list[str] = [
    "first_moment_of_month",
    "last_moment_of_month",
]
