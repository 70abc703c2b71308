"""Absolute-coordinate drawing primitives emitted by the interpreter."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, NamedTuple, Union


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def reflect(p: Point, r: Point) -> Point:
    """Reflect ``p`` through ``r``. Applying it twice returns ``p``."""
    return Point(2 * r.x - p.x, 2 * r.y - p.y)


class _Primitive:
    kind: str = ""

    @property
    def end(self) -> Point:
        """Pen position after this primitive is drawn."""
        return Point(self.x, self.y)  # type: ignore[attr-defined]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}  # type: ignore[call-overload]


@dataclass(frozen=True)
class MoveTo(_Primitive):
    kind = "move"

    x: float
    y: float


@dataclass(frozen=True)
class LineTo(_Primitive):
    kind = "line"

    x: float
    y: float


@dataclass(frozen=True)
class CurveTo(_Primitive):
    kind = "curve"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class QuadraticTo(_Primitive):
    kind = "quadratic"

    x1: float
    y1: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo(_Primitive):
    kind = "arc"

    rx: float
    ry: float
    x_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float


Primitive = Union[MoveTo, LineTo, CurveTo, QuadraticTo, ArcTo]
