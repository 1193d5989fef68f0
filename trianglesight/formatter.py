"""TriangleResult → description sentence and TriangleResponse model."""

from __future__ import annotations

import math

from trianglesight.engine.types import Layout, TriangleClassification, TriangleResult
from trianglesight.models.responses import (
    ClassificationModel,
    LabelModel,
    LayoutModel,
    TriangleResponse,
)
from trianglesight.utils.math_helpers import round_to_precision

# Decimal places shown on angle labels
DEGREES_PRECISION = 2


def _finite_or_none(value: float | None) -> float | None:
    # JSON has no NaN/Infinity
    if value is None or not math.isfinite(value):
        return None
    return value


def describe(classification: TriangleClassification) -> str:
    if not classification.valid:
        s0, s1, s2 = classification.sorted_sides
        return f"The triangle is invalid: {s0:g} + {s1:g} ≤ {s2:g}"

    side = classification.side_class.value if classification.side_class else "unclassified"
    if classification.angle_class is None:
        return f"These sides produce a valid {side} triangle, but its angles could not be computed."
    return f"These sides produce a valid {classification.angle_class.value}, {side} triangle."


def angle_label(degrees: float) -> str:
    return f"{round_to_precision(degrees, DEGREES_PRECISION):g}"


def side_label(length: float) -> str:
    return f"{length:g}"


def classification_to_model(classification: TriangleClassification) -> ClassificationModel:
    return ClassificationModel(
        valid=classification.valid,
        side_classification=classification.side_class,
        angle_classification=classification.angle_class,
        angle_a_radians=_finite_or_none(classification.angle_a),
        angle_b_radians=_finite_or_none(classification.angle_b),
        angle_c_radians=_finite_or_none(classification.angle_c),
        angle_a_degrees=_finite_or_none(classification.angle_a_degrees),
        angle_b_degrees=_finite_or_none(classification.angle_b_degrees),
        angle_c_degrees=_finite_or_none(classification.angle_c_degrees),
    )


def layout_labels(layout: Layout) -> list[LabelModel]:
    """Side labels sit on edge midpoints, angle labels on their vertex."""
    return [
        LabelModel(kind="side", position="bottom", text=side_label(layout.bottom_side), anchor=layout.bottom_mid),
        LabelModel(kind="side", position="right", text=side_label(layout.right_side), anchor=layout.right_mid),
        LabelModel(kind="side", position="left", text=side_label(layout.left_side), anchor=layout.left_mid),
        LabelModel(kind="angle", position="right", text=angle_label(layout.right_angle_degrees), anchor=layout.right),
        LabelModel(kind="angle", position="top", text=angle_label(layout.top_angle_degrees), anchor=layout.top),
        LabelModel(kind="angle", position="left", text=angle_label(layout.left_angle_degrees), anchor=layout.left),
    ]


def layout_to_model(layout: Layout) -> LayoutModel:
    return LayoutModel(
        orientation=layout.orientation,
        left_anchor_point=layout.left,
        right_anchor_point=layout.right,
        top_anchor_point=layout.top,
        left_right_anchor_midpoint=layout.bottom_mid,
        right_top_anchor_midpoint=layout.right_mid,
        top_left_anchor_midpoint=layout.left_mid,
        bottom_side=layout.bottom_side,
        right_side=layout.right_side,
        left_side=layout.left_side,
        top_angle_radians=layout.top_angle,
        right_angle_radians=layout.right_angle,
        left_angle_radians=layout.left_angle,
        top_angle_degrees=layout.top_angle_degrees,
        right_angle_degrees=layout.right_angle_degrees,
        left_angle_degrees=layout.left_angle_degrees,
        scale=layout.scale,
        labels=layout_labels(layout),
    )


def result_to_response(result: TriangleResult) -> TriangleResponse:
    classification = result.classification
    return TriangleResponse(
        classification=classification_to_model(classification) if classification else None,
        layout=layout_to_model(result.layout) if result.layout else None,
        description=describe(classification) if classification else "",
        error=result.error,
        message=result.message,
    )
