"""Command registry — every shell command is a function registered via decorator.

Usage:
    @command(name="reverse", description="Toggle reverse brightness")
    def reverse(shell: Shell, args: list[str]) -> None:
        shell.reverse = not shell.reverse

Adding a command = writing one decorated function. The interpreter picks it up
by name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from asciiart.shell.interpreter import Shell

logger = logging.getLogger(__name__)

CommandFn = Callable[["Shell", list[str]], None]


@dataclass
class CommandSpec:
    name: str
    fn: CommandFn
    description: str = ""
    # Printed when the handler rejects its arguments with ValueError
    format_error: str = ""


class CommandRegistry:
    """Name → command lookup."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.name in self._commands:
            raise ValueError(f"Duplicate command name: {spec.name}")
        self._commands[spec.name] = spec
        logger.debug("Registered command %s", spec.name)

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return sorted(self._commands)

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(*, name: str, description: str = "", format_error: str = ""):
    """Decorator to register a shell command."""

    def decorator(fn: CommandFn) -> CommandFn:
        _registry.register(
            CommandSpec(name=name, fn=fn, description=description, format_error=format_error)
        )
        return fn

    return decorator
