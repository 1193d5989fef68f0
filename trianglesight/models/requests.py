"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from trianglesight.engine.types import TriangleInput


class TriangleRequest(BaseModel):
    """Three side lengths plus optional canvas sizing.

    Accepts snake_case names as well as the PascalCase names
    (``SideA``, ``CanvasTriangleMaxWidth`` ...) older clients post.
    """

    model_config = ConfigDict(populate_by_name=True)

    side_a: float = Field(..., alias="SideA", gt=0, allow_inf_nan=False, description="Length of side a")
    side_b: float = Field(..., alias="SideB", gt=0, allow_inf_nan=False, description="Length of side b")
    side_c: float = Field(..., alias="SideC", gt=0, allow_inf_nan=False, description="Length of side c")
    canvas_triangle_max_width: int | None = Field(
        default=None,
        alias="CanvasTriangleMaxWidth",
        gt=0,
        description="On-screen width of the longest side (defaults to server setting)",
    )
    canvas_width: int | None = Field(
        default=None,
        alias="CanvasWidth",
        gt=0,
        description="Side of the square canvas (defaults to server setting)",
    )

    @model_validator(mode="after")
    def _check_canvas(self) -> TriangleRequest:
        if self.canvas_width is None or self.canvas_triangle_max_width is None:
            return self
        if self.canvas_triangle_max_width >= self.canvas_width:
            raise ValueError("canvas_triangle_max_width must be smaller than canvas_width")
        if (self.canvas_width - self.canvas_triangle_max_width) // 2 <= 0:
            raise ValueError("canvas leaves no padding around the triangle")
        return self

    def sides(self) -> TriangleInput:
        return TriangleInput(a=self.side_a, b=self.side_b, c=self.side_c)
