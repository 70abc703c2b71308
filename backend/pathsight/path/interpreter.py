"""Path-state machine — folds tokens into absolute-coordinate primitives.

The interpreter is a pure fold: ``step(state, token) -> state``. State is the
append-only tuple of primitives emitted so far; the current point and the
last curve control points are read off its tail.

Resolution rules per command:
    M  first group MoveTo, later groups LineTo (running current point)
    L  LineTo
    H  LineTo keeping current y          V  LineTo keeping current x
    C  CurveTo                           Q  QuadraticTo
    S  CurveTo, first control = previous CurveTo's second control reflected
       through the current point (current point when the last primitive is
       not a CurveTo)
    T  QuadraticTo, same rule against the previous QuadraticTo
    A  ArcTo, only the endpoint is offset for relative commands
    Z  LineTo(close anchor) then MoveTo(point before the close)

Relative groups are offset by the current point *at that group*, so repeated
groups chain.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any, Iterable

from pathsight.path.commands import ARG_SHAPES, Command, Token
from pathsight.path.errors import GrammarMismatchError, UnsupportedPathFeatureError
from pathsight.path.primitives import (
    ORIGIN,
    ArcTo,
    CurveTo,
    LineTo,
    MoveTo,
    Point,
    Primitive,
    QuadraticTo,
    reflect,
)
from pathsight.path.registry import get_registry, resolver
from pathsight.path.tokenizer import tokenize

logger = logging.getLogger(__name__)


class CloseAnchor(str, enum.Enum):
    """Where ClosePath draws back to."""

    # Very first primitive of the whole path
    FIRST_PRIMITIVE = "first_primitive"
    # Target of the most recent MoveTo
    SUBPATH_START = "subpath_start"


@dataclass(frozen=True)
class InterpreterOptions:
    close_anchor: CloseAnchor = CloseAnchor.FIRST_PRIMITIVE
    arc_support: bool = True

    @classmethod
    def from_settings(cls, settings: Any) -> InterpreterOptions:
        return cls(
            close_anchor=CloseAnchor(settings.close_anchor),
            arc_support=settings.arc_support,
        )


@dataclass(frozen=True)
class PathState:
    """Fold value threaded through ``step``."""

    primitives: tuple[Primitive, ...] = field(default_factory=tuple)
    # Target of the most recent MoveTo (None until one is emitted)
    subpath_start: Point | None = None

    @property
    def current_point(self) -> Point:
        return self.primitives[-1].end if self.primitives else ORIGIN

    @property
    def last_cubic_control(self) -> Point | None:
        last = self.primitives[-1] if self.primitives else None
        if isinstance(last, CurveTo):
            return Point(last.x2, last.y2)
        return None

    @property
    def last_quadratic_control(self) -> Point | None:
        last = self.primitives[-1] if self.primitives else None
        if isinstance(last, QuadraticTo):
            return Point(last.x1, last.y1)
        return None

    def close_anchor(self, policy: CloseAnchor) -> Point:
        if policy is CloseAnchor.SUBPATH_START:
            return self.subpath_start or ORIGIN
        return self.primitives[0].end if self.primitives else ORIGIN

    def emit(self, primitive: Primitive) -> PathState:
        if isinstance(primitive, MoveTo):
            return PathState(self.primitives + (primitive,), primitive.end)
        return replace(self, primitives=self.primitives + (primitive,))


@dataclass(frozen=True)
class ParsedPath:
    primitives: list[Primitive] = field(default_factory=list)
    tokens: tuple[Token, ...] = field(default_factory=tuple)
    remainder: str = ""
    offset: int = 0

    @property
    def complete(self) -> bool:
        return not self.remainder


def _groups(token: Token) -> tuple[Any, ...]:
    """Return the token's groups after checking them against the arity table."""
    shape = ARG_SHAPES[token.command]
    if shape is None:
        if token.groups:
            raise GrammarMismatchError(f"{token.letter} takes no arguments, got {len(token.groups)} groups")
        return ()
    if not token.groups:
        raise GrammarMismatchError(f"{token.letter} has no argument groups")
    for group in token.groups:
        if type(group) is not shape:
            raise GrammarMismatchError(
                f"{token.letter} expects {shape.__name__}, got {type(group).__name__}"
            )
    return token.groups


def _absolute(state: PathState, relative: bool, x: float, y: float) -> Point:
    if not relative:
        return Point(x, y)
    cx, cy = state.current_point
    return Point(x + cx, y + cy)


@resolver(Command.MOVE)
def _move(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    """First pair moves the pen; repeated pairs are implicit linetos."""
    for i, g in enumerate(_groups(token)):
        p = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(MoveTo(*p) if i == 0 else LineTo(*p))
    return state


@resolver(Command.LINE)
def _line(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        state = state.emit(LineTo(*_absolute(state, token.relative, g.x, g.y)))
    return state


@resolver(Command.HORIZONTAL)
def _horizontal(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        cx, cy = state.current_point
        state = state.emit(LineTo(g.value + cx if token.relative else g.value, cy))
    return state


@resolver(Command.VERTICAL)
def _vertical(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        cx, cy = state.current_point
        state = state.emit(LineTo(cx, g.value + cy if token.relative else g.value))
    return state


@resolver(Command.CUBIC)
def _cubic(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        c1 = _absolute(state, token.relative, g.x1, g.y1)
        c2 = _absolute(state, token.relative, g.x2, g.y2)
        end = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(CurveTo(*c1, *c2, *end))
    return state


@resolver(Command.SMOOTH_CUBIC)
def _smooth_cubic(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        current = state.current_point
        prior = state.last_cubic_control
        c1 = reflect(prior, current) if prior is not None else current
        c2 = _absolute(state, token.relative, g.x1, g.y1)
        end = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(CurveTo(*c1, *c2, *end))
    return state


@resolver(Command.QUADRATIC)
def _quadratic(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        c = _absolute(state, token.relative, g.x1, g.y1)
        end = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(QuadraticTo(*c, *end))
    return state


@resolver(Command.SMOOTH_QUADRATIC)
def _smooth_quadratic(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    for g in _groups(token):
        current = state.current_point
        prior = state.last_quadratic_control
        c = reflect(prior, current) if prior is not None else current
        end = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(QuadraticTo(*c, *end))
    return state


@resolver(Command.ARC)
def _arc(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    """Endpoint resolution only; radii, rotation and flags pass through."""
    if not options.arc_support:
        raise UnsupportedPathFeatureError(token.letter, "Arc commands are disabled (arc_support=False)")
    for g in _groups(token):
        end = _absolute(state, token.relative, g.x, g.y)
        state = state.emit(ArcTo(g.rx, g.ry, g.x_rotation, g.large_arc, g.sweep, *end))
    return state


@resolver(Command.CLOSE)
def _close(state: PathState, token: Token, options: InterpreterOptions) -> PathState:
    """Line back to the anchor, then re-open a move where the pen was."""
    _groups(token)
    before = state.current_point
    anchor = state.close_anchor(options.close_anchor)
    return state.emit(LineTo(*anchor)).emit(MoveTo(*before))


_missing = get_registry().missing()
if _missing:
    raise RuntimeError(f"Commands without a resolver: {sorted(c.value for c in _missing)}")


def step(state: PathState, token: Token, options: InterpreterOptions | None = None) -> PathState:
    """Apply one token to the state. Raises on grammar mismatch or unsupported features."""
    spec = get_registry().get(token.command)
    return spec.fn(state, token, options or InterpreterOptions())


def interpret(tokens: Iterable[Token], options: InterpreterOptions | None = None) -> list[Primitive]:
    """Fold a token sequence into primitives, starting from the empty state."""
    options = options or InterpreterOptions()
    final = reduce(lambda s, t: step(s, t, options), tokens, PathState())
    return list(final.primitives)


def read_path(d: str, options: InterpreterOptions | None = None) -> ParsedPath:
    """Tokenize and interpret one path-data string."""
    result = tokenize(d)
    primitives = interpret(result.tokens, options)
    logger.debug("Read path: %d tokens → %d primitives", len(result.tokens), len(primitives))
    return ParsedPath(
        primitives=primitives,
        tokens=result.tokens,
        remainder=result.remainder,
        offset=result.offset,
    )
