"""Command kinds, argument groups and the arity table shared by tokenizer and interpreter."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union

# Slot kinds inside an argument group
NUMBER = "number"
FLAG = "flag"


class Command(str, enum.Enum):
    MOVE = "M"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC = "C"
    SMOOTH_CUBIC = "S"
    QUADRATIC = "Q"
    SMOOTH_QUADRATIC = "T"
    ARC = "A"
    CLOSE = "Z"


_BY_LETTER: dict[str, Command] = {c.value: c for c in Command}


def lookup_command(char: str) -> tuple[Command, bool] | None:
    """Map a one-letter mnemonic to (command, relative).

    Lowercase letters are relative. Returns None for anything that is not a
    command letter.
    """
    if len(char) != 1:
        return None
    command = _BY_LETTER.get(char.upper())
    if command is None:
        return None
    return command, char.islower()


@dataclass(frozen=True)
class PointArgs:
    """(x, y) for moveto, lineto and smooth quadratic."""

    SLOTS: ClassVar[tuple[str, ...]] = (NUMBER, NUMBER)

    x: float
    y: float


@dataclass(frozen=True)
class ScalarArgs:
    """Single coordinate for horizontal and vertical lineto."""

    SLOTS: ClassVar[tuple[str, ...]] = (NUMBER,)

    value: float


@dataclass(frozen=True)
class CubicArgs:
    SLOTS: ClassVar[tuple[str, ...]] = (NUMBER,) * 6

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class SmoothArgs:
    """One control point plus endpoint.

    For S the control point is the *second* cubic control point; for Q it is
    the only quadratic one.
    """

    SLOTS: ClassVar[tuple[str, ...]] = (NUMBER,) * 4

    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcArgs:
    SLOTS: ClassVar[tuple[str, ...]] = (NUMBER, NUMBER, NUMBER, FLAG, FLAG, NUMBER, NUMBER)

    rx: float
    ry: float
    x_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float


ArgGroup = Union[PointArgs, ScalarArgs, CubicArgs, SmoothArgs, ArcArgs]

# Arity table: the argument-group shape each command consumes. None = no arguments.
ARG_SHAPES: dict[Command, type | None] = {
    Command.MOVE: PointArgs,
    Command.LINE: PointArgs,
    Command.HORIZONTAL: ScalarArgs,
    Command.VERTICAL: ScalarArgs,
    Command.CUBIC: CubicArgs,
    Command.SMOOTH_CUBIC: SmoothArgs,
    Command.QUADRATIC: SmoothArgs,
    Command.SMOOTH_QUADRATIC: PointArgs,
    Command.ARC: ArcArgs,
    Command.CLOSE: None,
}

if set(ARG_SHAPES) != set(Command):
    raise RuntimeError(f"Arity table out of sync: missing {set(Command) - set(ARG_SHAPES)}")


@dataclass(frozen=True)
class Token:
    """One command letter and the argument groups that followed it."""

    command: Command
    relative: bool = False
    groups: tuple[ArgGroup, ...] = field(default_factory=tuple)

    @property
    def letter(self) -> str:
        if self.command is Command.CLOSE:
            return "Z"
        return self.command.value.lower() if self.relative else self.command.value
