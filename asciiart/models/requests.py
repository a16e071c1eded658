"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    image_base64: str = Field(..., description="Base64-encoded image file (PNG, JPEG, ...)")
    resolution: int = Field(default=64, gt=0, description="Characters per output row")
    charset: str = Field(default="0123456789", description="Characters to draw with")
    reverse: bool = Field(default=False, description="Invert brightness before matching")
