"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    glyph_size: int = 0


class ConvertResponse(BaseModel):
    rows: int
    cols: int
    lines: list[str] = Field(default_factory=list)
    charset: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0
