"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ParseRequest(BaseModel):
    d: str = Field(..., description="Raw path data (the d attribute of a <path>)")


class DocumentRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class RenderRequest(BaseModel):
    svg: str | None = Field(default=None, description="Raw SVG code; every <path> is drawn")
    d: str | None = Field(default=None, description="Single path-data string")
    width: int | None = Field(default=None, gt=0, le=4096, description="Surface width in pixels")
    height: int | None = Field(default=None, gt=0, le=4096, description="Surface height in pixels")

    @model_validator(mode="after")
    def _one_source(self) -> RenderRequest:
        if (self.svg is None) == (self.d is None):
            raise ValueError("Provide exactly one of 'svg' or 'd'")
        return self
