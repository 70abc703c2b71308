"""PathSight — SVG path data to absolute drawing primitives."""

__version__ = "0.1.0"
