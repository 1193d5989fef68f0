"""Triangle geometry engine."""

from trianglesight.engine.classifier import classify
from trianglesight.engine.config import CanvasParams, ClassifierConfig
from trianglesight.engine.errors import (
    DegenerateGeometryError,
    ErrorKind,
    InvalidCanvasParamsError,
    InvalidTriangleError,
    TriangleError,
)
from trianglesight.engine.orientation import select_orientation
from trianglesight.engine.pipeline import Pipeline, create_pipeline, evaluate
from trianglesight.engine.projector import project
from trianglesight.engine.types import (
    AngleClass,
    Layout,
    Orientation,
    SideClass,
    TriangleClassification,
    TriangleInput,
    TriangleResult,
)

__all__ = [
    "classify",
    "project",
    "evaluate",
    "select_orientation",
    "Pipeline",
    "create_pipeline",
    "CanvasParams",
    "ClassifierConfig",
    "AngleClass",
    "SideClass",
    "Orientation",
    "Layout",
    "TriangleClassification",
    "TriangleInput",
    "TriangleResult",
    "ErrorKind",
    "TriangleError",
    "InvalidTriangleError",
    "DegenerateGeometryError",
    "InvalidCanvasParamsError",
]
