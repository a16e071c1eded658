"""HTML file renderer — writes the character matrix as a monospace page."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from asciiart.output.base import CharMatrix

logger = logging.getLogger(__name__)

# Font size in px and line height ratio keep cells roughly square.
_FONT_SIZE_PX = 6
_LINE_HEIGHT = 1.0


def serialize_html(chars: CharMatrix, font: str = "Courier New", title: str = "ASCII Art") -> str:
    """Generate an HTML document with the matrix inside a <pre> block."""
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="UTF-8">',
        f"  <title>{html.escape(title)}</title>",
        "</head>",
        "<body>",
        f'<pre style="font-family: \'{html.escape(font)}\', monospace; '
        f'font-size: {_FONT_SIZE_PX}px; line-height: {_LINE_HEIGHT};">',
    ]
    for row in chars:
        lines.append("".join(html.escape(c) + " " for c in row))
    lines.append("</pre>")
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines) + "\n"


class HtmlOutput:
    def __init__(self, path: str | Path, font: str = "Courier New") -> None:
        self.path = Path(path)
        self.font = font

    def out(self, chars: CharMatrix) -> None:
        self.path.write_text(serialize_html(chars, self.font), encoding="utf-8")
        logger.info("Wrote %d rows to %s", len(chars), self.path)
