"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from asciiart.engine.pixel_grid import PixelGrid

# Masks are 10×10 so a coverage of 0.1 is exactly 10 cells.
MASK_SIDE = 10

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def coverage_mask(fraction: float, side: int = MASK_SIDE) -> np.ndarray:
    """Boolean mask whose first ``fraction`` of cells are set."""
    total = side * side
    flat = np.zeros(total, dtype=bool)
    flat[: round(fraction * total)] = True
    return flat.reshape(side, side)


class FakeGlyphs:
    """Mask provider with fixed per-character coverage; counts calls."""

    def __init__(self, coverage: dict[str, float]) -> None:
        self.coverage = coverage
        self.calls: list[str] = []

    def __call__(self, char: str) -> np.ndarray:
        self.calls.append(char)
        return coverage_mask(self.coverage.get(char, 0.0))


def solid(width: int, height: int, color: tuple[int, int, int]) -> PixelGrid:
    return PixelGrid.filled(width, height, color)


def checkerboard(side: int) -> PixelGrid:
    yy, xx = np.indices((side, side))
    on = (yy + xx) % 2 == 0
    pixels = np.zeros((side, side, 3), dtype=np.uint8)
    pixels[on] = WHITE
    return PixelGrid(pixels)


# Coverage per digit: '0' darkest ... '9' brightest.
DIGIT_COVERAGE = {str(d): 0.05 + d * 0.05 for d in range(10)}
DOT_AT_COVERAGE = {".": 0.1, "@": 0.9}


@pytest.fixture
def dot_at_glyphs() -> FakeGlyphs:
    return FakeGlyphs(DOT_AT_COVERAGE)


@pytest.fixture
def digit_glyphs() -> FakeGlyphs:
    return FakeGlyphs({**DIGIT_COVERAGE, **DOT_AT_COVERAGE, " ": 0.0, "#": 0.7})


@pytest.fixture
def white_2x2() -> PixelGrid:
    return solid(2, 2, WHITE)


@pytest.fixture
def gradient_8x8() -> PixelGrid:
    """8×8 image whose columns run from black (left) to white (right)."""
    levels = np.linspace(0, 255, 8).round().astype(np.uint8)
    pixels = np.repeat(levels[np.newaxis, :, np.newaxis], 3, axis=2)
    pixels = np.repeat(pixels, 8, axis=0)
    return PixelGrid(pixels)
