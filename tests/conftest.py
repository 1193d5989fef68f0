"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from trianglesight.engine.config import CanvasParams

# (a, b, c) side triples used across the suite

RIGHT_345 = (3.0, 4.0, 5.0)
EQUILATERAL = (5.0, 5.0, 5.0)
ISOSCELES = (5.0, 5.0, 8.0)
OBTUSE_SCALENE = (2.0, 3.0, 4.0)
ACUTE_SCALENE = (4.0, 5.0, 6.0)
FLAT = (1.0, 1.0, 2.0)
IMPOSSIBLE = (1.0, 2.0, 5.0)
ROUNDED_RIGHT_ISOSCELES = (1.0, 1.0, math.sqrt(2))

VALID_TRIANGLES = [
    RIGHT_345,
    EQUILATERAL,
    ISOSCELES,
    OBTUSE_SCALENE,
    ACUTE_SCALENE,
    ROUNDED_RIGHT_ISOSCELES,
    (7.0, 24.0, 25.0),
    (0.3, 0.4, 0.5),
    (1000.0, 999.0, 1.5),
    (12.5, 3.25, 10.0),
]

INVALID_TRIANGLES = [
    FLAT,
    IMPOSSIBLE,
    (2.0, 4.0, 6.0),
    (10.0, 1.0, 1.0),
    (3.0, 1.0, 2.0),
    (0.0, 0.0, 0.0),
    (0.0, 5.0, 5.0),
    (-3.0, 4.0, 4.0),
]


@pytest.fixture
def canvas() -> CanvasParams:
    return CanvasParams(max_triangle_width=250, canvas_width=350)


def distance(p: tuple[float, float], q: tuple[float, float]) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])
