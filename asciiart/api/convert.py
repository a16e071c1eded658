"""POST /api/convert — one-shot image to character matrix conversion."""

from __future__ import annotations

import base64
import binascii
import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from asciiart.dependencies import get_rasterizer
from asciiart.engine.char_table import CharBrightnessTable
from asciiart.engine.pipeline import create_compositor
from asciiart.models.requests import ConvertRequest
from asciiart.models.responses import ConvertResponse
from asciiart.utils.glyphs import GlyphRasterizer
from asciiart.utils.image_io import load_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(
    req: ConvertRequest,
    rasterizer: GlyphRasterizer = Depends(get_rasterizer),
) -> ConvertResponse:
    start = time.perf_counter()

    try:
        data = base64.b64decode(req.image_base64, validate=True)
        image = load_image(data)
    except (binascii.Error, OSError) as e:
        raise HTTPException(status_code=422, detail=f"Could not decode image: {e}") from e

    table = CharBrightnessTable(rasterizer, req.charset)
    if len(table) < 2:
        raise HTTPException(status_code=422, detail="Charset is too small.")

    compositor = create_compositor()
    padded_width = compositor.padded(image).width
    if req.resolution > padded_width:
        raise HTTPException(
            status_code=422,
            detail=f"Resolution {req.resolution} exceeds padded image width {padded_width}",
        )

    matrix = compositor.run(image, req.resolution, table, req.reverse)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Converted %r at resolution %d in %.0fms", image, req.resolution, elapsed)

    return ConvertResponse(
        rows=len(matrix),
        cols=len(matrix[0]) if matrix else 0,
        lines=["".join(row) for row in matrix],
        charset=table.members(),
        processing_time_ms=round(elapsed, 1),
    )
