"""Output renderer interface."""

from __future__ import annotations

from typing import Protocol

CharMatrix = list[list[str]]


class AsciiOutput(Protocol):
    def out(self, chars: CharMatrix) -> None: ...
