"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]

PI_OVER_2 = math.pi / 2


def radians_to_degrees(radians: float) -> float:
    """Pure unit conversion. Every degree value in the project goes through here."""
    return 180 / math.pi * radians


def law_of_cosines_cosines(a: float, b: float, c: float) -> NDArray[np.float64]:
    """Cosines of the interior angles opposite a, b and c.

    The sides are first rescaled by a power of two so the largest lies in
    [0.5, 1). The scaling is exact and the cosines are scale-free, so tiny or
    huge sides square without underflow or overflow.
    """
    a, b, c = _normalize_scale(a, b, c)
    opposite = np.array([a, b, c], dtype=np.float64)
    adjacent_1 = np.array([b, c, a], dtype=np.float64)
    adjacent_2 = np.array([c, a, b], dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        return (adjacent_1**2 + adjacent_2**2 - opposite**2) / (2 * adjacent_1 * adjacent_2)


def _normalize_scale(a: float, b: float, c: float) -> tuple[float, float, float]:
    largest = max(abs(a), abs(b), abs(c))
    if not math.isfinite(largest) or largest == 0:
        return a, b, c
    _, exponent = math.frexp(largest)
    return (math.ldexp(a, -exponent), math.ldexp(b, -exponent), math.ldexp(c, -exponent))


def law_of_cosines_angles(a: float, b: float, c: float) -> tuple[float, float, float]:
    """Interior angles (radians) opposite a, b and c.

    Each angle is computed directly from the three sides:
        angle opposite x = arccos((y² + z² − x²) / (2·y·z))

    Nothing is clamped. A cosine outside [-1, 1] (rounding on a nearly flat
    triangle) or a NaN comes back as NaN, so the caller can
    reject it instead of drawing a wrong triangle.
    """
    cos_a, cos_b, cos_c = (float(v) for v in law_of_cosines_cosines(a, b, c))
    return (_acos_or_nan(cos_a), _acos_or_nan(cos_b), _acos_or_nan(cos_c))


def _acos_or_nan(x: float) -> float:
    # math.acos raises outside its domain; NaN fails the comparison too
    if -1.0 <= x <= 1.0:
        return math.acos(x)
    return math.nan


def midpoint(p: Point, q: Point) -> Point:
    """Arithmetic midpoint of two canvas points."""
    return ((p[0] + q[0]) / 2, (p[1] + q[1]) / 2)


def all_finite(*values: float) -> bool:
    """True if every value is a finite float (no NaN, no ±inf)."""
    return bool(np.all(np.isfinite(np.asarray(values, dtype=np.float64))))