"""Value types flowing through the engine.

Classifier output → TriangleClassification
Projector output  → Layout
Pipeline output   → TriangleResult

Everything is frozen: one request builds its values once and never mutates them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from trianglesight.engine.errors import ErrorKind
from trianglesight.utils.geometry import Point, radians_to_degrees


class SideClass(str, enum.Enum):
    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


class AngleClass(str, enum.Enum):
    ACUTE = "acute"
    OBTUSE = "obtuse"
    RIGHT = "right"


class Orientation(str, enum.Enum):
    """Which input side was placed on the bottom edge of the canvas."""

    BOTTOM_IS_A = "bottom_is_a"
    BOTTOM_IS_B = "bottom_is_b"
    BOTTOM_IS_C = "bottom_is_c"


def _degrees(radians: float | None) -> float | None:
    return None if radians is None else radians_to_degrees(radians)


@dataclass(frozen=True)
class TriangleInput:
    """Three side lengths, unordered. a/b/c keep their identity end to end."""

    a: float
    b: float
    c: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class TriangleClassification:
    valid: bool
    # Ascending copy of the inputs, used to explain an invalid triangle
    sorted_sides: tuple[float, float, float]
    side_class: SideClass | None = None
    angle_class: AngleClass | None = None
    # Interior angles in radians, opposite sides a, b, c
    angle_a: float | None = None
    angle_b: float | None = None
    angle_c: float | None = None

    @property
    def angle_a_degrees(self) -> float | None:
        return _degrees(self.angle_a)

    @property
    def angle_b_degrees(self) -> float | None:
        return _degrees(self.angle_b)

    @property
    def angle_c_degrees(self) -> float | None:
        return _degrees(self.angle_c)

    @property
    def angles(self) -> tuple[float, float, float] | None:
        if self.angle_a is None or self.angle_b is None or self.angle_c is None:
            return None
        return (self.angle_a, self.angle_b, self.angle_c)


@dataclass(frozen=True)
class Layout:
    """Canvas anchor points. Origin top-left, y grows downward."""

    orientation: Orientation

    # Vertices
    left: Point
    right: Point
    top: Point

    # Label anchors: one per edge
    bottom_mid: Point
    right_mid: Point
    left_mid: Point

    # Original (unscaled) side lengths in the rotated frame
    bottom_side: float
    right_side: float
    left_side: float

    # Interior angles (radians) at each vertex in the rotated frame
    top_angle: float
    right_angle: float
    left_angle: float

    # Pixels per input length unit
    scale: float

    @property
    def top_angle_degrees(self) -> float:
        return radians_to_degrees(self.top_angle)

    @property
    def right_angle_degrees(self) -> float:
        return radians_to_degrees(self.right_angle)

    @property
    def left_angle_degrees(self) -> float:
        return radians_to_degrees(self.left_angle)


@dataclass(frozen=True)
class TriangleResult:
    classification: TriangleClassification | None
    layout: Layout | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
