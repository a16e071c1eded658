"""Pipeline configuration — numeric constants shared by the conversion stages."""

from __future__ import annotations

from dataclasses import dataclass

# ── Named constants ──

# ITU-R BT.709 luma coefficients; the three weights sum to 1.0.
LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722

# Largest value of an 8-bit channel.
MAX_CHANNEL_VALUE = 255.0

WHITE = (255, 255, 255)


@dataclass(frozen=True)
class PipelineConfig:
    """Controls how images are padded before partitioning."""

    pad_color: tuple[int, int, int] = WHITE
