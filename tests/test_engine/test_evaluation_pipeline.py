"""Tests for the pipeline orchestrator."""

from __future__ import annotations

import logging
import math

import pytest

from trianglesight.engine.config import CanvasParams, ClassifierConfig
from trianglesight.engine.errors import ErrorKind
from trianglesight.engine.pipeline import Pipeline, create_pipeline, evaluate
from trianglesight.engine.types import AngleClass, Orientation, SideClass
from tests.conftest import FLAT, RIGHT_345, ROUNDED_RIGHT_ISOSCELES


def test_valid_triangle_gets_layout(canvas):
    result = evaluate(*RIGHT_345, canvas=canvas)
    assert result.ok
    assert result.error is None
    assert result.classification.side_class is SideClass.SCALENE
    assert result.layout is not None
    assert result.layout.orientation is Orientation.BOTTOM_IS_C


def test_invalid_triangle_is_a_result_state(canvas):
    result = evaluate(*FLAT, canvas=canvas)
    assert not result.ok
    assert result.error is ErrorKind.INVALID_TRIANGLE
    assert result.classification.valid is False
    assert result.layout is None
    assert result.message == "1 + 1 <= 2"


def test_degenerate_geometry_is_a_result_state(canvas):
    # Valid sides, but the scale to 250px overflows
    result = evaluate(1e-320, 1e-320, 1e-320, canvas=canvas)
    assert result.error is ErrorKind.DEGENERATE_GEOMETRY
    assert result.classification.valid is True
    assert result.layout is None
    assert "Non-finite" in result.message


def test_tiny_sides_are_laid_out(canvas):
    result = evaluate(3e-160, 4e-160, 5e-160, canvas=canvas)
    assert result.ok
    assert sum(result.classification.angles) == pytest.approx(math.pi, abs=1e-12)
    assert result.layout.top[0] == pytest.approx(210.0, abs=1e-9)
    assert result.layout.top[1] == pytest.approx(180.0, abs=1e-9)


@pytest.mark.parametrize("max_width, width", [(350, 350), (349, 350)])
def test_bad_canvas_is_a_result_state(max_width, width):
    result = evaluate(*RIGHT_345, canvas=CanvasParams(max_triangle_width=max_width, canvas_width=width))
    assert result.error is ErrorKind.INVALID_CANVAS_PARAMS
    assert result.classification is None
    assert result.layout is None


def test_pipeline_defaults_to_its_canvas():
    pipeline = Pipeline(canvas=CanvasParams(max_triangle_width=100, canvas_width=200))
    result = pipeline.run(*RIGHT_345)
    assert result.layout.left == (50.0, 150.0)
    assert result.layout.right == (150.0, 150.0)


def test_pipeline_uses_classifier_config():
    strict = create_pipeline()
    tolerant = create_pipeline(config=ClassifierConfig(right_angle_tolerance_deg=1e-6))
    assert strict.run(*ROUNDED_RIGHT_ISOSCELES).classification.angle_class is not AngleClass.RIGHT
    assert tolerant.run(*ROUNDED_RIGHT_ISOSCELES).classification.angle_class is AngleClass.RIGHT


def test_pipeline_is_reusable(canvas):
    pipeline = create_pipeline(canvas=canvas)
    first = pipeline.run(*RIGHT_345)
    pipeline.run(*FLAT)
    again = pipeline.run(*RIGHT_345)
    assert first == again


def test_pipeline_logs_failures(canvas, caplog):
    with caplog.at_level(logging.WARNING, logger="trianglesight.engine.pipeline"):
        evaluate(1e-320, 1e-320, 1e-320, canvas=canvas)
    assert "FAILED" in caplog.text
