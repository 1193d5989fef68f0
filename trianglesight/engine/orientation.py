"""Canonical orientation — the longest side goes on the bottom.

The rotation table below is the only place that knows which input side ends
up on which screen edge, and which interior angle sits at which vertex.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from trianglesight.engine.types import Orientation

SideName = Literal["a", "b", "c"]


@dataclass(frozen=True)
class Rotation:
    bottom: SideName
    right: SideName
    left: SideName
    # Vertex angles, named by the side they are opposite to
    top_angle: SideName
    right_angle: SideName
    left_angle: SideName


# The bottom-right vertex sits between the bottom and right edges, so its
# angle is the one opposite the left edge (and vice versa).
ROTATIONS: dict[Orientation, Rotation] = {
    Orientation.BOTTOM_IS_A: Rotation(
        bottom="a", right="b", left="c", top_angle="a", right_angle="c", left_angle="b"
    ),
    Orientation.BOTTOM_IS_B: Rotation(
        bottom="b", right="c", left="a", top_angle="b", right_angle="a", left_angle="c"
    ),
    Orientation.BOTTOM_IS_C: Rotation(
        bottom="c", right="a", left="b", top_angle="c", right_angle="b", left_angle="a"
    ),
}


def select_orientation(a: float, b: float, c: float) -> Orientation:
    """Largest side becomes the bottom; ties go to the first of a, b, c."""
    if a >= b and a >= c:
        return Orientation.BOTTOM_IS_A
    if b >= a and b >= c:
        return Orientation.BOTTOM_IS_B
    return Orientation.BOTTOM_IS_C


def rotation_for(orientation: Orientation) -> Rotation:
    return ROTATIONS[orientation]
