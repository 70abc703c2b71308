"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pathsight import __version__
from pathsight.config import settings
from pathsight.path.errors import DocumentError, GrammarMismatchError, UnsupportedPathFeatureError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="PathSight",
        description="SVG path-data interpreter — path strings to absolute drawing primitives",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from pathsight.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map path errors onto HTTP statuses."""

    @app.exception_handler(UnsupportedPathFeatureError)
    async def _unsupported(request: Request, exc: UnsupportedPathFeatureError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc), "command": exc.command})

    @app.exception_handler(DocumentError)
    async def _document(request: Request, exc: DocumentError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(GrammarMismatchError)
    async def _grammar(request: Request, exc: GrammarMismatchError) -> JSONResponse:
        logger.exception("Interpreter grammar fault on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal grammar mismatch"})


app = create_app()
