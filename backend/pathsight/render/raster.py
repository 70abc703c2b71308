"""Raster surface — draws primitives onto a PIL image.

Curves and arcs are flattened by sampling svgpathtools segments at evenly
spaced parameters, then the whole drawing is scaled uniformly to fit the
surface. Anything outside the surface is clipped by PIL.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier

from pathsight.path.primitives import ArcTo, CurveTo, LineTo, MoveTo, Primitive, QuadraticTo
from pathsight.render.visuals import PRIMITIVE_COLORS
from pathsight.utils.geometry import as_array, bbox

logger = logging.getLogger(__name__)

# Fraction of the surface left empty around the drawing
_DEFAULT_MARGIN = 0.05
_BACKGROUND = "#1a1a2e"


@dataclass(frozen=True)
class Stroke:
    """One flattened primitive: its kind and the polyline approximating it."""

    kind: str
    points: list[tuple[float, float]]


@dataclass(frozen=True)
class SurfaceTransform:
    """Uniform scale + offset from path space into surface pixels."""

    scale: float
    dx: float
    dy: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scale + self.dx, y * self.scale + self.dy)


def _segment(start: complex, p: Primitive):
    end = complex(p.x, p.y)
    if isinstance(p, LineTo):
        return Line(start, end)
    if isinstance(p, CurveTo):
        return CubicBezier(start, complex(p.x1, p.y1), complex(p.x2, p.y2), end)
    if isinstance(p, QuadraticTo):
        return QuadraticBezier(start, complex(p.x1, p.y1), end)
    if isinstance(p, ArcTo):
        if start == end:
            return None
        if p.rx == 0 or p.ry == 0:
            return Line(start, end)
        return Arc(start, complex(abs(p.rx), abs(p.ry)), p.x_rotation, p.large_arc, p.sweep, end)
    raise TypeError(f"Cannot flatten {type(p).__name__}")


def flatten(primitives: Sequence[Primitive], samples_per_segment: int = 16) -> list[Stroke]:
    """Approximate every drawing primitive by a polyline.

    Moves produce no stroke. Lines keep their two endpoints; curves and arcs
    are sampled at ``samples_per_segment`` + 1 parameters.
    """
    strokes: list[Stroke] = []
    pen = complex(0.0, 0.0)
    ts = np.linspace(0.0, 1.0, max(samples_per_segment, 1) + 1)

    for p in primitives:
        end = complex(p.x, p.y)
        if isinstance(p, MoveTo):
            pen = end
            continue
        seg = _segment(pen, p)
        if seg is None:
            pen = end
            continue
        if isinstance(seg, Line):
            pts = [(pen.real, pen.imag), (end.real, end.imag)]
        else:
            pts = []
            for t in ts:
                pt = seg.point(float(t))
                pts.append((pt.real, pt.imag))
        strokes.append(Stroke(kind=p.kind, points=pts))
        pen = end

    return strokes


def fit_transform(
    bounds: tuple[float, float, float, float],
    width: int,
    height: int,
    margin: float = _DEFAULT_MARGIN,
) -> SurfaceTransform:
    """Scale path-space ``bounds`` (xmin, ymin, xmax, ymax) to fit a width×height surface, centred."""
    xmin, ymin, xmax, ymax = bounds
    bw = xmax - xmin
    bh = ymax - ymin
    avail_w = width * (1 - 2 * margin)
    avail_h = height * (1 - 2 * margin)

    scales = (avail_w / bw if bw > 0 else None, avail_h / bh if bh > 0 else None)
    candidates = [s for s in scales if s is not None]
    scale = min(candidates) if candidates else 1.0

    dx = width / 2 - (xmin + bw / 2) * scale
    dy = height / 2 - (ymin + bh / 2) * scale
    return SurfaceTransform(scale=scale, dx=dx, dy=dy)


def viewbox_bounds(viewbox: tuple[float, float, float, float]) -> tuple[float, float, float, float]:
    x, y, w, h = viewbox
    return (x, y, x + w, y + h)


def rasterize(
    primitives: Sequence[Primitive],
    width: int = 640,
    height: int = 480,
    *,
    viewbox: tuple[float, float, float, float] | None = None,
    samples_per_segment: int = 16,
    line_width: int = 2,
    margin: float = _DEFAULT_MARGIN,
) -> Image.Image:
    """Draw primitives onto a new RGB surface, one colour per primitive kind.

    With a viewbox the drawing keeps document coordinates (the viewbox is
    fitted to the surface); otherwise the primitives' own bounds are used.
    """
    image = Image.new("RGB", (width, height), _BACKGROUND)
    strokes = flatten(primitives, samples_per_segment)
    if not strokes:
        return image

    if viewbox is not None:
        bounds = viewbox_bounds(viewbox)
        margin = 0.0
    else:
        bounds = bbox(as_array(pt for s in strokes for pt in s.points))
    transform = fit_transform(bounds, width, height, margin)

    draw = ImageDraw.Draw(image)
    for stroke in strokes:
        pts = [transform.apply(x, y) for x, y in stroke.points]
        draw.line(pts, fill=PRIMITIVE_COLORS[stroke.kind], width=line_width)

    logger.debug("Rasterized %d strokes onto %dx%d surface (scale %.3f)", len(strokes), width, height, transform.scale)
    return image


def rasterize_to_png(primitives: Sequence[Primitive], width: int = 640, height: int = 480, **kwargs) -> bytes:
    """``rasterize`` then encode as PNG bytes."""
    buf = io.BytesIO()
    rasterize(primitives, width, height, **kwargs).save(buf, format="PNG")
    return buf.getvalue()
