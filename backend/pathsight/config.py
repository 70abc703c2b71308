"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathsight_env: str = "development"
    pathsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Interpreter
    arc_support: bool = True
    close_anchor: Literal["first_primitive", "subpath_start"] = "first_primitive"

    # Raster surface
    surface_width: int = 640
    surface_height: int = 480
    samples_per_segment: int = 16

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
