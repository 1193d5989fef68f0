"""Tests for the canonical orientation table."""

from __future__ import annotations

import pytest

from trianglesight.engine.orientation import ROTATIONS, rotation_for, select_orientation
from trianglesight.engine.types import Orientation


def test_largest_side_is_bottom():
    assert select_orientation(5, 3, 4) is Orientation.BOTTOM_IS_A
    assert select_orientation(3, 5, 4) is Orientation.BOTTOM_IS_B
    assert select_orientation(3, 4, 5) is Orientation.BOTTOM_IS_C


@pytest.mark.parametrize(
    "sides, expected",
    [
        ((5, 5, 5), Orientation.BOTTOM_IS_A),
        ((5, 5, 3), Orientation.BOTTOM_IS_A),
        ((5, 3, 5), Orientation.BOTTOM_IS_A),
        ((3, 5, 5), Orientation.BOTTOM_IS_B),
    ],
)
def test_ties_go_to_first_side(sides, expected):
    assert select_orientation(*sides) is expected


def test_345_rotation():
    rotation = rotation_for(select_orientation(3, 4, 5))
    assert (rotation.bottom, rotation.right, rotation.left) == ("c", "a", "b")
    assert (rotation.top_angle, rotation.right_angle, rotation.left_angle) == ("c", "b", "a")


def test_rotation_table_is_cyclic():
    assert (ROTATIONS[Orientation.BOTTOM_IS_A].right, ROTATIONS[Orientation.BOTTOM_IS_A].left) == ("b", "c")
    assert (ROTATIONS[Orientation.BOTTOM_IS_B].right, ROTATIONS[Orientation.BOTTOM_IS_B].left) == ("c", "a")
    assert (ROTATIONS[Orientation.BOTTOM_IS_C].right, ROTATIONS[Orientation.BOTTOM_IS_C].left) == ("a", "b")


@pytest.mark.parametrize("orientation", list(Orientation))
def test_each_rotation_uses_every_side_once(orientation):
    rotation = ROTATIONS[orientation]
    assert {rotation.bottom, rotation.right, rotation.left} == {"a", "b", "c"}
    # Top angle faces the bottom edge; the corner angles face the opposite edge
    assert rotation.top_angle == rotation.bottom
    assert rotation.right_angle == rotation.left
    assert rotation.left_angle == rotation.right
