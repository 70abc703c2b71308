"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pathsight.path.interpreter import ParsedPath


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands: list[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    primitives: list[dict[str, Any]] = Field(default_factory=list)
    tokens_consumed: int = 0
    remainder: str = ""
    offset: int = 0
    complete: bool = True

    @classmethod
    def from_parsed(cls, parsed: ParsedPath) -> ParseResponse:
        return cls(
            primitives=[p.to_dict() for p in parsed.primitives],
            tokens_consumed=len(parsed.tokens),
            remainder=parsed.remainder,
            offset=parsed.offset,
            complete=parsed.complete,
        )


class DocumentResponse(BaseModel):
    paths: list[ParseResponse] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class PreviewResponse(BaseModel):
    svg: str
    primitive_count: int = 0
