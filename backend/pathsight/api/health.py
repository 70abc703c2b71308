"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathsight import __version__
from pathsight.models.responses import HealthResponse
from pathsight.path.commands import Command

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands=[c.value for c in Command],
    )
