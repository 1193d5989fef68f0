"""Pipeline orchestrator — classify, then project, for one set of sides."""

from __future__ import annotations

import logging
import time

from trianglesight.engine.classifier import classify
from trianglesight.engine.config import CanvasParams, ClassifierConfig
from trianglesight.engine.errors import ErrorKind, TriangleError
from trianglesight.engine.projector import project
from trianglesight.engine.types import TriangleResult

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs the classifier and the projector and turns engine errors into result states.

    Holds only immutable configuration, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        config: ClassifierConfig | None = None,
        canvas: CanvasParams | None = None,
    ) -> None:
        self.config = config or ClassifierConfig()
        self.canvas = canvas or CanvasParams()

    def run(
        self,
        a: float,
        b: float,
        c: float,
        canvas: CanvasParams | None = None,
    ) -> TriangleResult:
        start = time.perf_counter()
        canvas = canvas or self.canvas

        try:
            canvas.validate()
        except TriangleError as e:
            logger.warning("Rejected canvas: %s", e)
            return TriangleResult(classification=None, error=e.kind, message=str(e))

        classification = classify(a, b, c, self.config)
        if not classification.valid:
            s0, s1, s2 = classification.sorted_sides
            message = f"{s0:g} + {s1:g} <= {s2:g}"
            logger.info("Invalid triangle (%g, %g, %g): %s", a, b, c, message)
            return TriangleResult(
                classification=classification,
                error=ErrorKind.INVALID_TRIANGLE,
                message=message,
            )

        try:
            layout = project(classification, a, b, c, canvas)
        except TriangleError as e:
            logger.warning("Projection of (%g, %g, %g) FAILED: %s", a, b, c, e)
            return TriangleResult(classification=classification, error=e.kind, message=str(e))

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Evaluated (%g, %g, %g) as %s %s in %.2fms",
            a,
            b,
            c,
            classification.angle_class.value if classification.angle_class else "unclassified",
            classification.side_class.value if classification.side_class else "unclassified",
            elapsed,
        )
        return TriangleResult(classification=classification, layout=layout)


def create_pipeline(
    config: ClassifierConfig | None = None,
    canvas: CanvasParams | None = None,
) -> Pipeline:
    return Pipeline(config=config, canvas=canvas)


def evaluate(
    a: float,
    b: float,
    c: float,
    canvas: CanvasParams | None = None,
    config: ClassifierConfig | None = None,
) -> TriangleResult:
    """One-shot classify + project with default configuration."""
    return Pipeline(config=config).run(a, b, c, canvas)
