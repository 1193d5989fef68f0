"""Engine error taxonomy.

The classifier reports an invalid triangle as ``valid=False``. The projector
raises one of these; the pipeline turns them back into result states.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    INVALID_TRIANGLE = "invalid_triangle"
    DEGENERATE_GEOMETRY = "degenerate_geometry"
    INVALID_CANVAS_PARAMS = "invalid_canvas_params"


class TriangleError(ValueError):
    """Base class for every failure the engine reports."""

    kind: ErrorKind


class InvalidTriangleError(TriangleError):
    """Triangle inequality fails, or holds only with equality."""

    kind = ErrorKind.INVALID_TRIANGLE


class DegenerateGeometryError(TriangleError):
    """Scale, angle or coordinate came out NaN/inf."""

    kind = ErrorKind.DEGENERATE_GEOMETRY


class InvalidCanvasParamsError(TriangleError):
    """Canvas sizing leaves no positive padding around the triangle."""

    kind = ErrorKind.INVALID_CANVAS_PARAMS
