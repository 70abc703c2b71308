"""POST /api/render/* — debug previews of interpreted paths."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pathsight.config import Settings
from pathsight.dependencies import get_interpreter_options, get_settings
from pathsight.models.requests import RenderRequest
from pathsight.models.responses import PreviewResponse
from pathsight.path.interpreter import InterpreterOptions, read_path
from pathsight.path.primitives import Primitive
from pathsight.render.raster import rasterize_to_png
from pathsight.render.visuals import render_debug_svg
from pathsight.svg.document import extract_path_data, extract_viewbox

router = APIRouter(prefix="/render")


def _collect(
    req: RenderRequest,
    options: InterpreterOptions,
) -> tuple[list[Primitive], tuple[float, float, float, float] | None]:
    """Primitives for every path in the request, plus the document viewBox if any."""
    if req.d is not None:
        return read_path(req.d, options).primitives, None

    primitives: list[Primitive] = []
    for d in extract_path_data(req.svg):
        primitives.extend(read_path(d, options).primitives)
    return primitives, extract_viewbox(req.svg)


@router.post("/preview", response_model=PreviewResponse)
async def preview(
    req: RenderRequest,
    options: InterpreterOptions = Depends(get_interpreter_options),
) -> PreviewResponse:
    primitives, viewbox = _collect(req, options)
    return PreviewResponse(svg=render_debug_svg(primitives, viewbox), primitive_count=len(primitives))


@router.post("/png")
async def png(
    req: RenderRequest,
    options: InterpreterOptions = Depends(get_interpreter_options),
    settings: Settings = Depends(get_settings),
) -> Response:
    primitives, viewbox = _collect(req, options)
    data = rasterize_to_png(
        primitives,
        req.width or settings.surface_width,
        req.height or settings.surface_height,
        viewbox=viewbox,
        samples_per_segment=settings.samples_per_segment,
    )
    return Response(content=data, media_type="image/png")
