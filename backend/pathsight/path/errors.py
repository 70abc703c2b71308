"""Path error taxonomy.

Malformed path data is NOT an error: the tokenizer truncates and hands back
what it could read. The exceptions below are for faults that must stop a parse.
"""

from __future__ import annotations


class PathError(Exception):
    """Base class for every error raised by pathsight."""


class GrammarMismatchError(PathError):
    """A token's argument group does not fit its command kind.

    Raised by the interpreter when the tokenizer produced something it cannot
    resolve, i.e. the two disagree on the grammar.
    """


class UnsupportedPathFeatureError(PathError):
    """A command reached an interpreter configured without support for it."""

    def __init__(self, command: str, message: str | None = None) -> None:
        self.command = command
        super().__init__(message or f"Path command {command!r} is not implemented")


class DocumentError(PathError):
    """SVG markup could not be read."""
