"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from asciiart import __version__
from asciiart.dependencies import get_rasterizer
from asciiart.models.responses import HealthResponse
from asciiart.utils.glyphs import GlyphRasterizer

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(rasterizer: GlyphRasterizer = Depends(get_rasterizer)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        glyph_size=rasterizer.size,
    )
