"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from trianglesight.config import Settings, settings
from trianglesight.engine.pipeline import Pipeline, create_pipeline


def get_settings() -> Settings:
    return settings


def get_pipeline(settings: Settings = Depends(get_settings)) -> Pipeline:
    return create_pipeline(
        config=settings.classifier_config(),
        canvas=settings.canvas_params(),
    )
