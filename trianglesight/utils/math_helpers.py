"""Math helpers — tolerant comparisons and label rounding. No engine imports."""

from __future__ import annotations

import math


def equal_within(x: float, y: float, rel_tol: float = 0.0) -> bool:
    """Side-length equality. rel_tol == 0 means exact ``==``."""
    if rel_tol <= 0:
        return x == y
    return abs(x - y) <= rel_tol * max(abs(x), abs(y))


def round_to_precision(value: float, precision: int = 2) -> float:
    """Round half up to ``precision`` decimals for display labels.

    ``round()`` rounds half to even, so 0.125 would print as 0.12.
    """
    if not math.isfinite(value):
        return value
    factor = 10**precision
    return math.floor(value * factor + 0.5) / factor
