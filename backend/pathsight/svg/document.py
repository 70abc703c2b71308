"""SVG document reader — pulls raw path data out of markup.

Only ``d`` attributes on ``path`` elements are collected, verbatim and in
document order. Namespaces are ignored: tags and attributes are matched on
their local names. No further validation of the document is done.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from pathsight.path.errors import DocumentError

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def _local(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    return name.rsplit("}", 1)[-1]


def _parse(svg_text: str) -> ET.Element:
    try:
        return ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise DocumentError(f"Malformed SVG markup: {e}") from e


def extract_path_data(svg_text: str) -> list[str]:
    """Return the ``d`` attribute of every ``path`` element."""
    root = _parse(svg_text)
    paths: list[str] = []
    for el in root.iter():
        if not isinstance(el.tag, str) or _local(el.tag) != "path":
            continue
        for name, value in el.attrib.items():
            if _local(name) == "d":
                paths.append(value)

    logger.info("Extracted %d path strings from SVG document", len(paths))
    return paths


def read_path_data(path: str | Path) -> list[str]:
    """Same as ``extract_path_data`` but reads the document from disk."""
    try:
        svg_text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot read {path}: {e}") from e
    return extract_path_data(svg_text)


def extract_viewbox(svg_text: str) -> tuple[float, float, float, float] | None:
    """Root ``viewBox`` as (min_x, min_y, width, height), or None if absent/invalid."""
    root = _parse(svg_text)
    raw = next((v for k, v in root.attrib.items() if _local(k) == "viewBox"), None)
    if raw is None:
        return None
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(raw.strip()) if p]
    if len(parts) != 4:
        logger.warning("Ignoring viewBox with %d values: %r", len(parts), raw)
        return None
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        logger.warning("Ignoring non-numeric viewBox: %r", raw)
        return None
    if width <= 0 or height <= 0:
        return None
    return (min_x, min_y, width, height)
