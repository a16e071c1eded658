"""Brightness reduction — one normalized grayscale scalar per grid."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from asciiart.engine.config import LUMA_BLUE, LUMA_GREEN, LUMA_RED, MAX_CHANNEL_VALUE
from asciiart.engine.pixel_grid import PixelGrid

_LUMA = np.array([LUMA_RED, LUMA_GREEN, LUMA_BLUE], dtype=np.float64)


def compute_brightness(image: PixelGrid) -> float:
    """Mean BT.709 luma of every pixel, scaled into [0, 1]."""
    luma = image.pixels.astype(np.float64) @ _LUMA
    return float(luma.sum() / luma.size / MAX_CHANNEL_VALUE)


def brightness_matrix(blocks: list[list[PixelGrid]]) -> NDArray[np.float64]:
    """Reduce each block of a split grid; result has the same rows × cols shape."""
    rows = len(blocks)
    cols = len(blocks[0]) if rows else 0
    out = np.zeros((rows, cols), dtype=np.float64)
    for r, line in enumerate(blocks):
        for c, block in enumerate(line):
            out[r, c] = compute_brightness(block)
    return out
