"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from asciiart.config import settings
from asciiart.utils.glyphs import GlyphRasterizer


@lru_cache(maxsize=1)
def get_rasterizer() -> GlyphRasterizer:
    return GlyphRasterizer.from_settings(settings)
