"""CompositorCache — image-derived state memoized between conversion runs.

Padded image → keyed by the source image.
Blocks / brightness matrix → keyed by (source image, resolution).
Nothing here depends on the character table.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from asciiart.engine.pixel_grid import PixelGrid


@dataclass
class CompositorCache:
    # Source image the cached entries were derived from
    source: PixelGrid | None = None
    padded: PixelGrid | None = None
    # Resolution the blocks and brightness matrix were computed at
    resolution: int | None = None
    blocks: list[list[PixelGrid]] | None = None
    brightness: NDArray[np.float64] | None = None

    def matches_image(self, image: PixelGrid) -> bool:
        return self.source is image

    def reset_image(self, image: PixelGrid) -> None:
        """Drop everything and start tracking a new source image."""
        self.source = image
        self.padded = None
        self.reset_resolution(None)

    def reset_resolution(self, resolution: int | None) -> None:
        self.resolution = resolution
        self.blocks = None
        self.brightness = None

    @property
    def shape(self) -> tuple[int, int]:
        if self.brightness is None:
            return (0, 0)
        rows, cols = self.brightness.shape
        return (int(rows), int(cols))
