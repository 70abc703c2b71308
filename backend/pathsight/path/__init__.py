"""Path-data parsing core: tokenizer + interpreter."""

from pathsight.path.commands import Command, Token
from pathsight.path.errors import (
    DocumentError,
    GrammarMismatchError,
    PathError,
    UnsupportedPathFeatureError,
)
from pathsight.path.interpreter import (
    CloseAnchor,
    InterpreterOptions,
    ParsedPath,
    PathState,
    interpret,
    read_path,
    step,
)
from pathsight.path.primitives import ArcTo, CurveTo, LineTo, MoveTo, Point, QuadraticTo, reflect
from pathsight.path.tokenizer import TokenizeResult, tokenize

__all__ = [
    "Command",
    "Token",
    "PathError",
    "GrammarMismatchError",
    "UnsupportedPathFeatureError",
    "DocumentError",
    "CloseAnchor",
    "InterpreterOptions",
    "ParsedPath",
    "PathState",
    "interpret",
    "read_path",
    "step",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "QuadraticTo",
    "ArcTo",
    "Point",
    "reflect",
    "TokenizeResult",
    "tokenize",
]
