"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from trianglesight.engine.errors import ErrorKind
from trianglesight.engine.types import AngleClass, Orientation, SideClass


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ClassificationModel(BaseModel):
    valid: bool
    side_classification: SideClass | None = None
    angle_classification: AngleClass | None = None
    angle_a_radians: float | None = None
    angle_b_radians: float | None = None
    angle_c_radians: float | None = None
    angle_a_degrees: float | None = None
    angle_b_degrees: float | None = None
    angle_c_degrees: float | None = None


class LabelModel(BaseModel):
    kind: Literal["side", "angle"]
    # Edge ("bottom", "right", "left") or vertex ("left", "right", "top")
    position: str
    text: str
    anchor: tuple[float, float]


class LayoutModel(BaseModel):
    orientation: Orientation
    left_anchor_point: tuple[float, float]
    right_anchor_point: tuple[float, float]
    top_anchor_point: tuple[float, float]
    left_right_anchor_midpoint: tuple[float, float]
    right_top_anchor_midpoint: tuple[float, float]
    top_left_anchor_midpoint: tuple[float, float]
    bottom_side: float
    right_side: float
    left_side: float
    top_angle_radians: float
    right_angle_radians: float
    left_angle_radians: float
    top_angle_degrees: float
    right_angle_degrees: float
    left_angle_degrees: float
    scale: float
    labels: list[LabelModel] = Field(default_factory=list)


class TriangleResponse(BaseModel):
    classification: ClassificationModel | None = None
    layout: LayoutModel | None = None
    description: str = ""
    error: ErrorKind | None = None
    message: str = ""
