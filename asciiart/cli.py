"""Command-line entry point.

    asciiart photo.jpg                     # interactive shell
    asciiart photo.jpg -r 64 -c " .:-=+*#%@"   # one-shot conversion
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from asciiart.config import settings
from asciiart.engine.char_table import CharBrightnessTable
from asciiart.engine.pipeline import create_compositor
from asciiart.engine.pixel_grid import PixelGrid
from asciiart.logging_setup import configure_logging
from asciiart.output.console import ConsoleOutput
from asciiart.output.html import HtmlOutput
from asciiart.utils.glyphs import GlyphRasterizer
from asciiart.utils.image_io import load_image


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to ASCII art")
    parser.add_argument("image", help="Path to the image file")
    parser.add_argument("-r", "--resolution", type=int, help="Characters per row (one-shot mode)")
    parser.add_argument("-c", "--chars", help="Character set (one-shot mode)")
    parser.add_argument("--reverse", action="store_true", help="Invert brightness")
    parser.add_argument("--html", metavar="PATH", help="Write HTML to PATH instead of printing")
    return parser


def _one_shot(args: argparse.Namespace, image: PixelGrid, rasterizer: GlyphRasterizer) -> int:
    charset = args.chars if args.chars is not None else settings.default_charset
    table = CharBrightnessTable(rasterizer, charset)
    if len(table) < 2:
        print("Did not execute. Charset is too small.")
        return 1

    resolution = args.resolution or settings.default_resolution
    matrix = create_compositor().run(image, resolution, table, args.reverse)

    if args.html:
        HtmlOutput(args.html, settings.html_font).out(matrix)
    else:
        ConsoleOutput().out(matrix)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    configure_logging(settings)
    args = build_parser().parse_args(argv)

    try:
        image = load_image(args.image)
    except OSError:
        print("Error: failed to load image")
        return 1

    rasterizer = GlyphRasterizer.from_settings(settings)

    if args.resolution is not None or args.chars is not None or args.html or args.reverse:
        try:
            return _one_shot(args, image, rasterizer)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    from asciiart.shell.interpreter import Shell

    Shell(image, rasterizer, settings=settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
