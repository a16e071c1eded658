"""ArtCompositor — runs pad → split → reduce → lookup with stage memoization."""

from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray

from asciiart.engine.brightness import brightness_matrix
from asciiart.engine.char_table import CharBrightnessTable
from asciiart.engine.config import PipelineConfig
from asciiart.engine.context import CompositorCache
from asciiart.engine.partition import pad_to_power_of_two, split_blocks
from asciiart.engine.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

CharMatrix = list[list[str]]


class ArtCompositor:
    """Converts images to character matrices.

    Image-derived stages are cached on the instance and reused as long as the
    same image object and resolution are passed in. The character table is
    consulted fresh on every run, so mutating it between runs re-resolves
    characters without recomputing block brightness.
    """

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()
        self.cache = CompositorCache()

    def run(
        self,
        image: PixelGrid,
        resolution: int,
        table: CharBrightnessTable,
        reverse: bool = False,
    ) -> CharMatrix:
        """Run the full conversion and return a row-major character matrix."""
        start = time.perf_counter()
        brightness = self.brightness(image, resolution)

        if reverse:
            lo, hi = table.bounds()
            brightness = np.clip(1.0 - brightness, lo, hi)

        t0 = time.perf_counter()
        result = [[table.nearest(float(b)) for b in row] for row in brightness]
        logger.debug("  lookup completed in %.1fms", (time.perf_counter() - t0) * 1000)

        rows, cols = brightness.shape
        logger.info(
            "Compositor: %dx%d characters (reverse=%s) in %.0fms",
            cols,
            rows,
            reverse,
            (time.perf_counter() - start) * 1000,
        )
        return result

    def padded(self, image: PixelGrid) -> PixelGrid:
        if not self.cache.matches_image(image):
            self.cache.reset_image(image)
        if self.cache.padded is None:
            t0 = time.perf_counter()
            self.cache.padded = pad_to_power_of_two(image, self.config.pad_color)
            logger.debug("  pad completed in %.1fms", (time.perf_counter() - t0) * 1000)
        return self.cache.padded

    def blocks(self, image: PixelGrid, resolution: int) -> list[list[PixelGrid]]:
        padded = self.padded(image)
        if self.cache.resolution != resolution:
            self.cache.reset_resolution(resolution)
        if self.cache.blocks is None:
            t0 = time.perf_counter()
            self.cache.blocks = split_blocks(padded, resolution)
            logger.debug("  split completed in %.1fms", (time.perf_counter() - t0) * 1000)
        return self.cache.blocks

    def brightness(self, image: PixelGrid, resolution: int) -> NDArray[np.float64]:
        """Cached per-block brightness matrix for (image, resolution)."""
        blocks = self.blocks(image, resolution)
        if self.cache.brightness is None:
            t0 = time.perf_counter()
            self.cache.brightness = brightness_matrix(blocks)
            logger.debug("  reduce completed in %.1fms", (time.perf_counter() - t0) * 1000)
        return self.cache.brightness


def create_compositor(config: PipelineConfig | None = None) -> ArtCompositor:
    """Factory function for creating a compositor instance."""
    return ArtCompositor(config=config)
