"""Image loading — decode files or bytes into PixelGrid."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image

from asciiart.engine.pixel_grid import PixelGrid


def pil_to_grid(img: Image.Image) -> PixelGrid:
    """Convert any Pillow image to an RGB PixelGrid (alpha is dropped)."""
    return PixelGrid(np.asarray(img.convert("RGB"), dtype=np.uint8))


def load_image(source: str | Path | bytes) -> PixelGrid:
    """Read an image from a path or raw encoded bytes.

    Raises OSError (Pillow's UnidentifiedImageError included) when the
    source cannot be decoded.
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    with Image.open(source) as img:
        return pil_to_grid(img)
