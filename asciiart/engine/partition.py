"""Partitioning — pad images to power-of-two sides and cut them into square blocks."""

from __future__ import annotations

import logging

import numpy as np

from asciiart.engine.config import WHITE
from asciiart.engine.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two ≥ n (n itself if it already is one)."""
    if n <= 0:
        raise ValueError(f"Dimension must be positive, got {n}")
    return 1 << (n - 1).bit_length()


def pad_to_power_of_two(
    image: PixelGrid,
    fill: tuple[int, int, int] = WHITE,
) -> PixelGrid:
    """Pad ``image`` so both sides are powers of two, content centered.

    Returns ``image`` itself when no padding is needed. Otherwise a new grid
    filled with ``fill`` receives the original at offset
    ``((new_w - w) // 2, (new_h - h) // 2)``.
    """
    width, height = image.width, image.height
    new_width = next_power_of_two(width)
    new_height = next_power_of_two(height)

    if new_width == width and new_height == height:
        return image

    x_off = (new_width - width) // 2
    y_off = (new_height - height) // 2

    canvas = np.empty((new_height, new_width, 3), dtype=np.uint8)
    canvas[:, :] = fill
    canvas[y_off:y_off + height, x_off:x_off + width] = image.pixels

    logger.debug(
        "Padded %dx%d → %dx%d (offset %d,%d)",
        width, height, new_width, new_height, x_off, y_off,
    )
    return PixelGrid(canvas)


def block_side(image: PixelGrid, resolution: int) -> int:
    """Side length of one square block when ``image`` is cut into ``resolution`` columns."""
    if resolution <= 0:
        raise ValueError(f"Resolution must be positive, got {resolution}")
    side = image.width // resolution
    if side == 0:
        raise ValueError(
            f"Resolution {resolution} exceeds image width {image.width}"
        )
    return side


def split_blocks(image: PixelGrid, resolution: int) -> list[list[PixelGrid]]:
    """Cut ``image`` into rows × ``resolution`` square sub-grids.

    Block side is ``width // resolution``; rows is ``height // side``. Pixels
    past the last full block on either axis are dropped.
    """
    side = block_side(image, resolution)
    rows = image.height // side
    pixels = image.pixels

    blocks: list[list[PixelGrid]] = []
    for row in range(rows):
        y0 = row * side
        line: list[PixelGrid] = []
        for col in range(resolution):
            x0 = col * side
            # PixelGrid copies, so blocks never alias the parent buffer
            line.append(PixelGrid(pixels[y0:y0 + side, x0:x0 + side]))
        blocks.append(line)

    logger.debug("Split %r into %dx%d blocks of side %d", image, rows, resolution, side)
    return blocks
