"""Glyph rasterization — character → fixed-size boolean coverage mask.

The masks feed CharBrightnessTable, which only counts set cells, so the exact
font matters less than every mask sharing one size.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

from asciiart.config import Settings

logger = logging.getLogger(__name__)

# Grayscale ink level above which a cell counts as covered (half of 255).
_INK_THRESHOLD = 127


class GlyphRasterizer:
    """Renders characters centered on a square canvas and thresholds them.

    Instances are callable and satisfy the ``GlyphMaskProvider`` protocol.
    Masks are cached per character.
    """

    def __init__(self, size: int = 16, font_path: str = "") -> None:
        if size <= 0:
            raise ValueError(f"Glyph size must be positive, got {size}")
        self.size = size
        if font_path:
            self.font = ImageFont.truetype(font_path, size)
        else:
            self.font = ImageFont.load_default(size=size)
        self._cache: dict[str, NDArray[np.bool_]] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> GlyphRasterizer:
        return cls(size=settings.glyph_size, font_path=settings.glyph_font_path)

    def __call__(self, char: str) -> NDArray[np.bool_]:
        return self.mask(char)

    def mask(self, char: str) -> NDArray[np.bool_]:
        cached = self._cache.get(char)
        if cached is not None:
            return cached

        img = Image.new("L", (self.size, self.size), 0)
        draw = ImageDraw.Draw(img)
        left, top, right, bottom = draw.textbbox((0, 0), char, font=self.font)
        x = (self.size - (right - left)) // 2 - left
        y = (self.size - (bottom - top)) // 2 - top
        draw.text((x, y), char, fill=255, font=self.font)

        mask = np.asarray(img, dtype=np.uint8) > _INK_THRESHOLD
        mask.flags.writeable = False
        self._cache[char] = mask
        logger.debug("Rasterized %r: %d/%d cells", char, int(mask.sum()), mask.size)
        return mask
