"""Plain-text renderer for terminals."""

from __future__ import annotations

import sys
from typing import TextIO

from asciiart.output.base import CharMatrix


def matrix_to_text(chars: CharMatrix, sep: str = " ") -> str:
    """One line per row; every character is followed by ``sep``."""
    return "\n".join("".join(c + sep for c in row) for row in chars)


class ConsoleOutput:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def out(self, chars: CharMatrix) -> None:
        stream = self.stream or sys.stdout
        stream.write(matrix_to_text(chars) + "\n")
        stream.flush()
