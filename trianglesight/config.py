"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from trianglesight.engine.config import CanvasParams, ClassifierConfig


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Canvas: 350px square, 50px padding for labels on every side
    canvas_width: int = 350
    canvas_triangle_max_width: int = 250

    # Classification tolerances (0 = exact comparisons)
    side_tolerance_rel: float = 0.0
    right_angle_tolerance_deg: float = 0.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TRIANGLESIGHT_",
    }

    def canvas_params(self) -> CanvasParams:
        return CanvasParams(
            max_triangle_width=self.canvas_triangle_max_width,
            canvas_width=self.canvas_width,
        )

    def classifier_config(self) -> ClassifierConfig:
        return ClassifierConfig(
            side_tolerance_rel=self.side_tolerance_rel,
            right_angle_tolerance_deg=self.right_angle_tolerance_deg,
        )


settings = Settings()
