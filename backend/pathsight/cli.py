"""Command line entry point.

    pathsight parse drawing.svg          # JSON primitives for every <path>
    pathsight parse -d "M0 0 L10 10"     # JSON primitives for one path string
    pathsight render drawing.svg -o out.png
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pathsight.config import settings
from pathsight.path.errors import PathError
from pathsight.path.interpreter import CloseAnchor, InterpreterOptions, read_path
from pathsight.render.raster import rasterize_to_png
from pathsight.svg.document import extract_path_data, extract_viewbox

logger = logging.getLogger(__name__)


def _parse_cmd(args: argparse.Namespace, options: InterpreterOptions) -> int:
    if args.data is not None:
        sources = [args.data]
    else:
        sources = extract_path_data(Path(args.input).read_text(encoding="utf-8"))

    results = []
    for d in sources:
        parsed = read_path(d, options)
        results.append({
            "primitives": [p.to_dict() for p in parsed.primitives],
            "remainder": parsed.remainder,
            "offset": parsed.offset,
        })
    print(json.dumps(results, indent=args.indent))
    return 0


def _render_cmd(args: argparse.Namespace, options: InterpreterOptions) -> int:
    svg_text = Path(args.input).read_text(encoding="utf-8")
    primitives = []
    for d in extract_path_data(svg_text):
        primitives.extend(read_path(d, options).primitives)

    data = rasterize_to_png(
        primitives,
        args.width,
        args.height,
        viewbox=extract_viewbox(svg_text),
        samples_per_segment=settings.samples_per_segment,
    )
    Path(args.output).write_bytes(data)
    print(f"Rendered {len(primitives)} primitives → {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathsight", description="SVG path data → absolute drawing primitives")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--no-arcs", action="store_true", help="Treat arc commands as unsupported")
    parser.add_argument(
        "--close-anchor",
        choices=["first_primitive", "subpath_start"],
        default=None,
        help="Point that Z closes back to",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Print primitives as JSON")
    src = p_parse.add_mutually_exclusive_group(required=True)
    src.add_argument("input", nargs="?", help="SVG file")
    src.add_argument("-d", "--data", help="Path data string")
    p_parse.add_argument("--indent", type=int, default=None, help="JSON indent")
    p_parse.set_defaults(handler=_parse_cmd)

    p_render = sub.add_parser("render", help="Rasterize every path of an SVG file to PNG")
    p_render.add_argument("input", help="SVG file")
    p_render.add_argument("-o", "--output", required=True, help="Output PNG file")
    p_render.add_argument("--width", type=int, default=settings.surface_width)
    p_render.add_argument("--height", type=int, default=settings.surface_height)
    p_render.set_defaults(handler=_render_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.pathsight_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    base = InterpreterOptions.from_settings(settings)
    options = InterpreterOptions(
        close_anchor=base.close_anchor if args.close_anchor is None else CloseAnchor(args.close_anchor),
        arc_support=base.arc_support and not args.no_arcs,
    )

    try:
        return args.handler(args, options)
    except (PathError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
