"""Classifier — validity, side class, angle class and interior angles from three sides."""

from __future__ import annotations

import logging
import math

from trianglesight.engine.config import ClassifierConfig
from trianglesight.engine.types import AngleClass, SideClass, TriangleClassification
from trianglesight.utils.geometry import PI_OVER_2, law_of_cosines_angles
from trianglesight.utils.math_helpers import equal_within

logger = logging.getLogger(__name__)


def classify(
    a: float,
    b: float,
    c: float,
    config: ClassifierConfig | None = None,
) -> TriangleClassification:
    """Classify the triangle with sides a, b, c.

    Never raises on bad numbers. Zero, negative or NaN sides fail the strict
    triangle inequality and come back as ``valid=False`` with every other
    field unset.
    """
    config = config or ClassifierConfig()
    s0, s1, s2 = sorted((a, b, c))

    # Strict: s0 + s1 == s2 is a flat (collinear) triangle
    if not s0 + s1 > s2:
        logger.debug("Invalid triangle: %g + %g <= %g", s0, s1, s2)
        return TriangleClassification(valid=False, sorted_sides=(s0, s1, s2))

    angle_a, angle_b, angle_c = law_of_cosines_angles(a, b, c)
    side_class = classify_sides(a, b, c, config.side_tolerance_rel)
    angle_class = classify_angles(angle_a, angle_b, angle_c, config.right_angle_tolerance_deg)

    logger.debug(
        "Classified (%g, %g, %g): %s, %s",
        a,
        b,
        c,
        side_class.value,
        angle_class.value if angle_class else None,
    )
    return TriangleClassification(
        valid=True,
        sorted_sides=(s0, s1, s2),
        side_class=side_class,
        angle_class=angle_class,
        angle_a=angle_a,
        angle_b=angle_b,
        angle_c=angle_c,
    )


def classify_sides(a: float, b: float, c: float, rel_tol: float = 0.0) -> SideClass:
    ab = equal_within(a, b, rel_tol)
    bc = equal_within(b, c, rel_tol)
    ac = equal_within(a, c, rel_tol)
    if ab and bc:
        return SideClass.EQUILATERAL
    if ab or ac or bc:
        return SideClass.ISOSCELES
    return SideClass.SCALENE


def classify_angles(
    angle_a: float,
    angle_b: float,
    angle_c: float,
    right_tolerance_deg: float = 0.0,
) -> AngleClass | None:
    """Acute / obtuse / right from radians. None if any angle is NaN.

    Exact mode checks acute, then obtuse, then right (== π/2), in that order.
    With a tolerance the right test has to run first, otherwise an
    89.999° triangle would already have been called acute.
    """
    angles = (angle_a, angle_b, angle_c)
    if any(math.isnan(x) for x in angles):
        return None

    if right_tolerance_deg > 0:
        tol = math.radians(right_tolerance_deg)
        largest = max(angles)
        if abs(largest - PI_OVER_2) <= tol:
            return AngleClass.RIGHT
        return AngleClass.OBTUSE if largest > PI_OVER_2 else AngleClass.ACUTE

    if all(x < PI_OVER_2 for x in angles):
        return AngleClass.ACUTE
    if any(x > PI_OVER_2 for x in angles):
        return AngleClass.OBTUSE
    if any(x == PI_OVER_2 for x in angles):
        return AngleClass.RIGHT
    return None
