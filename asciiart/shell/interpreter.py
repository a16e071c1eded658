"""Interactive shell — reads commands and drives the conversion engine.

Holds the session state (character table, resolution, reverse flag, output
mode) for one loaded image. The compositor is kept for the whole session, so
repeated ``asciiArt`` runs at the same resolution reuse cached brightness.
"""

from __future__ import annotations

import logging
from typing import Callable

import asciiart.shell.commands  # noqa: F401  (registers commands)
from asciiart.config import Settings, settings as default_settings
from asciiart.engine.char_table import CharBrightnessTable, GlyphMaskProvider
from asciiart.engine.partition import pad_to_power_of_two
from asciiart.engine.pipeline import ArtCompositor, create_compositor
from asciiart.engine.pixel_grid import PixelGrid
from asciiart.output.base import AsciiOutput
from asciiart.output.console import ConsoleOutput
from asciiart.output.html import HtmlOutput
from asciiart.shell.registry import CommandRegistry, get_registry

logger = logging.getLogger(__name__)

PROMPT = ">>> "
INCORRECT_COMMAND = "Did not execute due to incorrect command."


class Shell:
    def __init__(
        self,
        image: PixelGrid,
        mask_provider: GlyphMaskProvider,
        settings: Settings | None = None,
        registry: CommandRegistry | None = None,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.settings = settings or default_settings
        self.registry = registry or get_registry()
        self.read_line = read_line
        self.write = write

        self.image = image
        padded = pad_to_power_of_two(image)
        self.padded_width = padded.width
        self.padded_height = padded.height

        self.table = CharBrightnessTable(mask_provider, self.settings.default_charset)
        self.compositor: ArtCompositor = create_compositor()
        self.resolution = min(
            max(self.settings.default_resolution, self.min_resolution), self.max_resolution
        )
        self.reverse = False
        self.html_output = False
        self.running = False

    # ── Resolution bounds (padded image) ──

    @property
    def min_resolution(self) -> int:
        return max(1, self.padded_width // self.padded_height)

    @property
    def max_resolution(self) -> int:
        return self.padded_width

    def make_output(self) -> AsciiOutput:
        if self.html_output:
            return HtmlOutput(self.settings.html_output_path, self.settings.html_font)
        return ConsoleOutput()

    # ── Loop ──

    def run(self) -> None:
        self.running = True
        while self.running:
            try:
                line = self.read_line(PROMPT)
            except EOFError:
                break
            self.execute(line)
        self.running = False

    def execute(self, line: str) -> None:
        """Parse and run a single command line."""
        parts = line.split()
        if not parts:
            return
        name, args = parts[0], parts[1:]

        spec = self.registry.get(name)
        if spec is None:
            self.write(INCORRECT_COMMAND)
            return

        logger.debug("Command %s %s", name, args)
        try:
            spec.fn(self, args)
        except ValueError as e:
            logger.debug("  %s rejected: %s", name, e)
            self.write(spec.format_error or INCORRECT_COMMAND)
