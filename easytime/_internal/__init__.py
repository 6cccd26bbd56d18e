"""Internal utilities for EasyTime.

This module contains private implementation details:
    - The fixed offset constant and unit sizes
    - Argument validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from easytime._internal.validation import (
    require_date,
    require_instant,
    require_naive_datetime,
    require_timestamp,
)

__all__: list[str] = [
    "require_date",
    "require_instant",
    "require_naive_datetime",
    "require_timestamp",
]
