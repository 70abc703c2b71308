"""FastAPI dependency injection."""

from __future__ import annotations

from pathsight.config import Settings, settings
from pathsight.path.interpreter import InterpreterOptions


def get_settings() -> Settings:
    return settings


def get_interpreter_options() -> InterpreterOptions:
    return InterpreterOptions.from_settings(settings)
