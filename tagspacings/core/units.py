# tagspacings/core/units.py
"""
Format a linear measurement for display: px, rem, percent or a spacing token.
"""

from __future__ import annotations

import math

from tagspacings.core.config import DEFAULT_ROOT_SIZE, REM_DECIMALS, SPACING_VAR_PREFIX


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up. Monotone in value."""
    return int(math.floor(value + 0.5))


def format_size(size: float, units: str = "px", root_size: float = DEFAULT_ROOT_SIZE) -> str:
    """Display string for size. Non-positive root_size falls back to the default; unknown units render as px."""
    if units == "rem":
        root = root_size if root_size > 0 else DEFAULT_ROOT_SIZE
        return f"{size / root:.{REM_DECIMALS}f}rem"
    if units == "percent":
        return f"{round_half_up(size)}%"
    if units == "var":
        return f"var({SPACING_VAR_PREFIX}{round_half_up(size)})"
    return f"{round_half_up(size)}px"
