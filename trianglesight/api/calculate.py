"""POST /api/calculate — classify three sides and lay the triangle out on the canvas."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from trianglesight.config import Settings
from trianglesight.dependencies import get_pipeline, get_settings
from trianglesight.engine.config import CanvasParams
from trianglesight.engine.errors import ErrorKind
from trianglesight.engine.pipeline import Pipeline
from trianglesight.formatter import result_to_response
from trianglesight.models.requests import TriangleRequest
from trianglesight.models.responses import TriangleResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _canvas_for(req: TriangleRequest, settings: Settings) -> CanvasParams:
    return CanvasParams(
        max_triangle_width=req.canvas_triangle_max_width or settings.canvas_triangle_max_width,
        canvas_width=req.canvas_width or settings.canvas_width,
    )


@router.post("/calculate", response_model=TriangleResponse)
async def calculate(
    req: TriangleRequest,
    pipeline: Pipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> TriangleResponse:
    result = pipeline.run(*req.sides().as_tuple(), canvas=_canvas_for(req, settings))

    # One explicit canvas size plus a server default can still leave no padding
    if result.error is ErrorKind.INVALID_CANVAS_PARAMS:
        raise HTTPException(status_code=422, detail=result.message)

    return result_to_response(result)
