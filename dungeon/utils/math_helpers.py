"""Math helpers: number parsing and formatting. No engine imports."""

from __future__ import annotations

import math
import re

_NUMBER_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")


def parse_number(text: str) -> int | float | None:
    """Parse an int or float, returning None for anything non-numeric ("12px", "")."""
    text = text.strip()
    if not _NUMBER_RE.match(text):
        return None
    value = float(text)
    if value.is_integer() and "." not in text and "e" not in text.lower():
        return int(value)
    return value


def format_number(value: float, precision: int = 3) -> str:
    """Format a number for SVG output: integral values without a decimal point."""
    if float(value).is_integer():
        return str(int(value))
    return f"{round(value, precision):.{precision}f}".rstrip("0").rstrip(".")


def in_unit_interval(value: float) -> bool:
    return 0 <= value <= 1


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded
