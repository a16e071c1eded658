"""PixelGrid — the immutable RGB raster every pipeline stage reads from."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


class PixelGrid:
    """Read-only H×W grid of RGB samples.

    The backing array is copied on construction and flagged non-writeable, so
    a grid never aliases the buffer it was built from.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: NDArray[np.uint8] | Sequence[Sequence[Sequence[int]]]) -> None:
        arr = np.array(pixels, dtype=np.uint8, copy=True)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected an H×W×3 RGB array, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError("PixelGrid must have positive width and height")
        arr.flags.writeable = False
        self._pixels = arr

    @classmethod
    def filled(cls, width: int, height: int, color: tuple[int, int, int]) -> PixelGrid:
        """Grid of the given size with every pixel set to ``color``."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid grid size {width}x{height}")
        return cls(np.full((height, width, 3), color, dtype=np.uint8))

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> NDArray[np.uint8]:
        """Read-only view of the H×W×3 array."""
        return self._pixels

    def get_pixel(self, row: int, col: int) -> tuple[int, int, int]:
        r, g, b = self._pixels[row, col]
        return (int(r), int(g), int(b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    def __hash__(self) -> int:
        return hash((self._pixels.shape, self._pixels.tobytes()))

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"
