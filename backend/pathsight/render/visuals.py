"""Debug SVG previews of a primitive sequence.

Each primitive is redrawn as its own ``<path>`` from the running pen position,
stroked in the colour of its kind, so the interpreter's output can be checked
by eye. Moves are drawn as small dots. Uses only string formatting.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from pathsight.path.primitives import ArcTo, CurveTo, LineTo, MoveTo, Point, Primitive, QuadraticTo
from pathsight.utils.geometry import as_array, bbox, expand_bbox

# One stroke colour per primitive kind
PRIMITIVE_COLORS: dict[str, str] = {
    MoveTo.kind: "#e6194b",
    LineTo.kind: "#3cb44b",
    CurveTo.kind: "#4363d8",
    QuadraticTo.kind: "#f58231",
    ArcTo.kind: "#911eb4",
}

# Padding around auto-computed bounds: 5% of the larger side
_MARGIN_PCT = 0.05

# Stroke width and marker radius as fractions of the viewBox diagonal
_STROKE_PCT = 0.004
_MARKER_PCT = 0.008


def _fmt(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _pt(x: float, y: float) -> str:
    return f"{_fmt(x)},{_fmt(y)}"


def primitive_points(primitives: Iterable[Primitive]) -> list[Point]:
    """Every endpoint and control point, for bounds computation."""
    pts: list[Point] = []
    for p in primitives:
        if isinstance(p, CurveTo):
            pts.extend([Point(p.x1, p.y1), Point(p.x2, p.y2)])
        elif isinstance(p, QuadraticTo):
            pts.append(Point(p.x1, p.y1))
        pts.append(p.end)
    return pts


def auto_viewbox(primitives: Sequence[Primitive]) -> tuple[float, float, float, float]:
    """(min_x, min_y, width, height) covering all primitives plus a margin."""
    xmin, ymin, xmax, ymax = expand_bbox(bbox(as_array(primitive_points(primitives))), _MARGIN_PCT)
    return (xmin, ymin, xmax - xmin, ymax - ymin)


def _segment_d(pen: Point, p: Primitive) -> str:
    start = f"M {_pt(*pen)}"
    if isinstance(p, LineTo):
        return f"{start} L {_pt(p.x, p.y)}"
    if isinstance(p, CurveTo):
        return f"{start} C {_pt(p.x1, p.y1)} {_pt(p.x2, p.y2)} {_pt(p.x, p.y)}"
    if isinstance(p, QuadraticTo):
        return f"{start} Q {_pt(p.x1, p.y1)} {_pt(p.x, p.y)}"
    if isinstance(p, ArcTo):
        return (
            f"{start} A {_fmt(p.rx)} {_fmt(p.ry)} {_fmt(p.x_rotation)} "
            f"{int(p.large_arc)} {int(p.sweep)} {_pt(p.x, p.y)}"
        )
    raise TypeError(f"Cannot draw {type(p).__name__} as a segment")


def _svg_wrap(content: str, viewbox: tuple[float, float, float, float]) -> str:
    """Wrap SVG content in a standalone SVG document."""
    x, y, w, h = viewbox
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{_fmt(x)} {_fmt(y)} {_fmt(w)} {_fmt(h)}"'
        ' style="background:#1a1a2e">'
        f"\n{content}\n</svg>"
    )


def render_debug_svg(
    primitives: Sequence[Primitive],
    viewbox: tuple[float, float, float, float] | None = None,
) -> str:
    """Render primitives as a standalone debug SVG, one colour per primitive kind."""
    if viewbox is None:
        viewbox = auto_viewbox(primitives)
    diag = math.hypot(viewbox[2], viewbox[3])
    stroke = _fmt(max(diag * _STROKE_PCT, 0.01))
    radius = _fmt(max(diag * _MARKER_PCT, 0.02))

    parts: list[str] = []
    pen = Point(0.0, 0.0)
    for p in primitives:
        color = PRIMITIVE_COLORS[p.kind]
        if isinstance(p, MoveTo):
            parts.append(f'<circle cx="{_fmt(p.x)}" cy="{_fmt(p.y)}" r="{radius}" fill="{color}"/>')
        else:
            parts.append(
                f'<path d="{_segment_d(pen, p)}" fill="none" stroke="{color}" '
                f'stroke-width="{stroke}" data-kind="{p.kind}"/>'
            )
        pen = p.end

    return _svg_wrap("\n".join(parts), viewbox)
