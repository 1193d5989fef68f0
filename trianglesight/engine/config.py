"""Engine configuration — classification tolerances and canvas sizing."""

from __future__ import annotations

from dataclasses import dataclass

from trianglesight.engine.errors import InvalidCanvasParamsError


@dataclass(frozen=True)
class ClassifierConfig:
    """Controls how strictly sides and angles are compared.

    The defaults reproduce exact floating-point equality. That is fragile:
    1, 1, √2 is not detected as a right triangle. Set a tolerance to opt in
    to approximate comparisons.
    """

    # Relative tolerance for "these two sides are equal" (0 = exact)
    side_tolerance_rel: float = 0.0

    # Absolute tolerance around 90° for the right-angle test (0 = exact)
    right_angle_tolerance_deg: float = 0.0


@dataclass(frozen=True)
class CanvasParams:
    """Square drawing area with the triangle's longest side scaled to a fixed width."""

    # Target on-screen length of the bottom (longest) side
    max_triangle_width: int = 250
    # Side of the square canvas
    canvas_width: int = 350

    @property
    def padding(self) -> int:
        # Integer division: odd leftovers go to the right/top edge
        return (self.canvas_width - self.max_triangle_width) // 2

    def validate(self) -> None:
        if self.max_triangle_width <= 0 or self.canvas_width <= 0:
            raise InvalidCanvasParamsError(
                f"Canvas sizes must be positive (max_triangle_width={self.max_triangle_width}, "
                f"canvas_width={self.canvas_width})"
            )
        if self.max_triangle_width >= self.canvas_width:
            raise InvalidCanvasParamsError(
                f"max_triangle_width ({self.max_triangle_width}) must be smaller than "
                f"canvas_width ({self.canvas_width})"
            )
        if self.padding <= 0:
            raise InvalidCanvasParamsError(
                f"Canvas leaves no padding around the triangle (max_triangle_width="
                f"{self.max_triangle_width}, canvas_width={self.canvas_width})"
            )
