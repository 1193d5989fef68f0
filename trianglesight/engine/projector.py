"""Layout Projector — canonical orientation, scaling and canvas anchor points.

Pure function of its inputs. The left edge is never scaled directly: the top
vertex is found from the right edge and the angle at the bottom-right vertex
(the inscribed right triangle under the right edge), and the left edge simply
closes the shape.
"""

from __future__ import annotations

import logging
import math

from trianglesight.engine.config import CanvasParams
from trianglesight.engine.errors import DegenerateGeometryError, InvalidTriangleError
from trianglesight.engine.orientation import rotation_for, select_orientation
from trianglesight.engine.types import Layout, TriangleClassification
from trianglesight.utils.geometry import all_finite, midpoint

logger = logging.getLogger(__name__)

# Allowed drift of the interior angle sum from pi
ANGLE_SUM_TOLERANCE = 1e-6


def project(
    classification: TriangleClassification,
    a: float,
    b: float,
    c: float,
    canvas: CanvasParams | None = None,
) -> Layout:
    """Place the triangle on the canvas with its longest side at the bottom.

    Raises:
        InvalidTriangleError: the classification is not valid.
        InvalidCanvasParamsError: the canvas leaves no room for padding.
        DegenerateGeometryError: a scale, angle or coordinate is not finite, or
            the angles do not sum to pi.
    """
    canvas = canvas or CanvasParams()
    canvas.validate()

    angles = classification.angles
    if not classification.valid or angles is None:
        raise InvalidTriangleError(
            "Cannot lay out an invalid triangle: %g + %g <= %g" % classification.sorted_sides
        )

    orientation = select_orientation(a, b, c)
    rotation = rotation_for(orientation)
    sides = {"a": a, "b": b, "c": c}
    angle_by_side = dict(zip("abc", angles))

    bottom_side = sides[rotation.bottom]
    right_side = sides[rotation.right]
    left_side = sides[rotation.left]
    top_angle = angle_by_side[rotation.top_angle]
    right_angle = angle_by_side[rotation.right_angle]
    left_angle = angle_by_side[rotation.left_angle]

    if not all_finite(top_angle, right_angle, left_angle):
        raise DegenerateGeometryError(
            f"Non-finite interior angle for sides ({a:g}, {b:g}, {c:g})"
        )
    angle_sum = top_angle + right_angle + left_angle
    if abs(angle_sum - math.pi) > ANGLE_SUM_TOLERANCE:
        raise DegenerateGeometryError(
            f"Interior angles of ({a:g}, {b:g}, {c:g}) sum to {angle_sum!r}, not pi"
        )
    if bottom_side <= 0:
        raise DegenerateGeometryError(f"Bottom side must be positive, got {bottom_side:g}")

    scale = canvas.max_triangle_width / bottom_side
    if not math.isfinite(scale):
        raise DegenerateGeometryError(f"Non-finite scale for bottom side {bottom_side:g}")

    normalized_bottom = bottom_side * scale
    normalized_right = right_side * scale

    # Start at the bottom-left corner of the padded area
    left = (float(canvas.padding), float(canvas.canvas_width - canvas.padding))
    right = (left[0] + normalized_bottom, left[1])

    # Inscribed right triangle under the right edge
    height = normalized_right * math.sin(right_angle)
    horizontal_offset = normalized_right * math.cos(right_angle)
    top = (right[0] - horizontal_offset, right[1] - height)

    if not all_finite(*right, *top):
        raise DegenerateGeometryError(
            f"Non-finite anchor point for sides ({a:g}, {b:g}, {c:g})"
        )

    layout = Layout(
        orientation=orientation,
        left=left,
        right=right,
        top=top,
        bottom_mid=midpoint(left, right),
        right_mid=midpoint(top, right),
        left_mid=midpoint(top, left),
        bottom_side=bottom_side,
        right_side=right_side,
        left_side=left_side,
        top_angle=top_angle,
        right_angle=right_angle,
        left_angle=left_angle,
        scale=scale,
    )
    logger.debug(
        "Projected %s: left=%s right=%s top=%s",
        orientation.value,
        left,
        right,
        top,
    )
    return layout
