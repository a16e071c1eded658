"""Tests for glyph rasterization and image loading."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from asciiart.engine.char_table import CharBrightnessTable, mask_coverage
from asciiart.utils.glyphs import GlyphRasterizer
from asciiart.utils.image_io import load_image, pil_to_grid


@pytest.fixture(scope="module")
def rasterizer() -> GlyphRasterizer:
    return GlyphRasterizer(size=16)


def test_masks_share_shape(rasterizer):
    for c in "a@. #":
        mask = rasterizer(c)
        assert mask.shape == (16, 16)
        assert mask.dtype == bool


def test_space_is_empty(rasterizer):
    assert not rasterizer(" ").any()


def test_dense_glyph_covers_more(rasterizer):
    assert mask_coverage(rasterizer("@")) > mask_coverage(rasterizer("."))


def test_masks_cached(rasterizer):
    assert rasterizer("x") is rasterizer("x")


def test_rejects_bad_size():
    with pytest.raises(ValueError):
        GlyphRasterizer(size=0)


def test_table_with_real_glyphs(rasterizer):
    table = CharBrightnessTable(rasterizer, " .@")
    assert table.nearest(0.0) == " "
    assert table.nearest(1.0) == "@"


def _png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def test_load_image_from_bytes():
    grid = load_image(_png_bytes(Image.new("RGB", (3, 2), (10, 20, 30))))
    assert (grid.width, grid.height) == (3, 2)
    assert grid.get_pixel(1, 2) == (10, 20, 30)


def test_load_image_from_path(tmp_path):
    path = tmp_path / "img.png"
    Image.new("L", (4, 4), 255).save(path)
    grid = load_image(path)
    assert np.all(grid.pixels == 255)


def test_load_image_drops_alpha():
    grid = pil_to_grid(Image.new("RGBA", (2, 2), (1, 2, 3, 0)))
    assert grid.pixels.shape == (2, 2, 3)


def test_load_image_rejects_garbage():
    with pytest.raises(OSError):
        load_image(b"not an image")
