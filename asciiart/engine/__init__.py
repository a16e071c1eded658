"""asciiart conversion engine — partitioning, brightness and character matching."""

from asciiart.engine.brightness import brightness_matrix, compute_brightness
from asciiart.engine.char_table import CharBrightnessTable, CharEntry, TableState
from asciiart.engine.config import PipelineConfig
from asciiart.engine.partition import pad_to_power_of_two, split_blocks
from asciiart.engine.pipeline import ArtCompositor, create_compositor
from asciiart.engine.pixel_grid import PixelGrid

__all__ = [
    "ArtCompositor",
    "CharBrightnessTable",
    "CharEntry",
    "PipelineConfig",
    "PixelGrid",
    "TableState",
    "brightness_matrix",
    "compute_brightness",
    "create_compositor",
    "pad_to_power_of_two",
    "split_blocks",
]
