"""Leaf-node geometry helpers. No path-package imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def as_array(points: Iterable[tuple[float, float]]) -> NDArray[np.float64]:
    """Nx2 float array from (x, y) pairs; empty input gives shape (0, 2)."""
    pts = np.asarray(list(points), dtype=np.float64)
    return pts.reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def expand_bbox(
    box: tuple[float, float, float, float],
    margin_pct: float,
    min_size: float = 1.0,
) -> tuple[float, float, float, float]:
    """Grow a bbox by a fraction of its larger side; degenerate boxes get ``min_size``."""
    xmin, ymin, xmax, ymax = box
    size = max(xmax - xmin, ymax - ymin, min_size)
    pad = size * margin_pct
    return (xmin - pad, ymin - pad, xmax + pad, ymax + pad)
