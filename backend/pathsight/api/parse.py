"""POST /api/parse and /api/document — path data → primitives."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from pathsight.dependencies import get_interpreter_options
from pathsight.models.requests import DocumentRequest, ParseRequest
from pathsight.models.responses import DocumentResponse, ParseResponse
from pathsight.path.interpreter import InterpreterOptions, read_path
from pathsight.svg.document import extract_path_data

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
async def parse(
    req: ParseRequest,
    options: InterpreterOptions = Depends(get_interpreter_options),
) -> ParseResponse:
    return ParseResponse.from_parsed(read_path(req.d, options))


@router.post("/document", response_model=DocumentResponse)
async def document(
    req: DocumentRequest,
    options: InterpreterOptions = Depends(get_interpreter_options),
) -> DocumentResponse:
    start = time.perf_counter()
    paths = [ParseResponse.from_parsed(read_path(d, options)) for d in extract_path_data(req.svg)]
    elapsed = (time.perf_counter() - start) * 1000
    return DocumentResponse(paths=paths, processing_time_ms=round(elapsed, 1))
