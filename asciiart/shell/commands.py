"""Shell command handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from asciiart.shell.registry import command

if TYPE_CHECKING:
    from asciiart.shell.interpreter import Shell

logger = logging.getLogger(__name__)

# Printable ASCII range accepted by add/remove.
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126

_ADD_ERROR = "Did not add due to incorrect format."
_REMOVE_ERROR = "Did not remove due to incorrect format."
_RES_FORMAT_ERROR = "Did not change resolution due to incorrect format."
_RES_BOUNDS_ERROR = "Did not change resolution due to exceeding boundaries."
_OUTPUT_ERROR = "Did not change output method due to incorrect format."
_CHARSET_TOO_SMALL = "Did not execute. Charset is too small."
_ART_ERROR = "Did not execute due to invalid resolution for this image."
_OUTPUT_WRITE_ERROR = "Did not execute. Failed to write output."


def _is_printable(c: str) -> bool:
    return _FIRST_PRINTABLE <= ord(c) <= _LAST_PRINTABLE


def parse_char_spec(arg: str, strict: bool = True) -> list[str]:
    """Expand an add/remove argument into characters.

    Accepts ``all``, ``space``, a single printable character, or a range
    ``a-z`` in either direction. Out-of-range characters raise ValueError
    when ``strict``; otherwise they expand to nothing.
    """
    if arg == "all":
        return [chr(i) for i in range(_FIRST_PRINTABLE, _LAST_PRINTABLE + 1)]
    if arg == "space":
        return [" "]
    if len(arg) == 3 and arg[1] == "-":
        start, end = arg[0], arg[2]
        if not (_is_printable(start) and _is_printable(end)):
            if strict:
                raise ValueError(f"Range outside printable ASCII: {arg!r}")
            return []
        step = 1 if start <= end else -1
        return [chr(i) for i in range(ord(start), ord(end) + step, step)]
    if len(arg) == 1:
        if not _is_printable(arg):
            if strict:
                raise ValueError(f"Not printable ASCII: {arg!r}")
            return []
        return [arg]
    raise ValueError(f"Unrecognized character spec: {arg!r}")


@command(name="exit", description="Leave the shell")
def exit_shell(shell: Shell, args: list[str]) -> None:
    shell.running = False


@command(name="chars", description="List the current character set")
def chars(shell: Shell, args: list[str]) -> None:
    shell.write("".join(c + " " for c in shell.table.members()))


@command(name="add", description="Add characters to the set", format_error=_ADD_ERROR)
def add(shell: Shell, args: list[str]) -> None:
    if not args:
        raise ValueError("missing argument")
    for c in parse_char_spec(args[0], strict=True):
        shell.table.add(c)


@command(name="remove", description="Remove characters from the set", format_error=_REMOVE_ERROR)
def remove(shell: Shell, args: list[str]) -> None:
    if not args:
        raise ValueError("missing argument")
    for c in parse_char_spec(args[0], strict=False):
        shell.table.remove(c)


@command(name="res", description="Show or change resolution", format_error=_RES_FORMAT_ERROR)
def res(shell: Shell, args: list[str]) -> None:
    if not args:
        shell.write(f"Resolution set to {shell.resolution}.")
        return

    action = args[0]
    if action == "up":
        new_res = shell.resolution * 2
    elif action == "down":
        new_res = shell.resolution // 2
        if new_res < 1:
            raise ValueError("resolution cannot drop below 1")
    else:
        raise ValueError(f"unknown res action {action!r}")

    if new_res < shell.min_resolution or new_res > shell.max_resolution:
        shell.write(_RES_BOUNDS_ERROR)
        return
    shell.resolution = new_res
    shell.write(f"Resolution set to {shell.resolution}.")


@command(name="reverse", description="Toggle reverse brightness")
def reverse(shell: Shell, args: list[str]) -> None:
    shell.reverse = not shell.reverse


@command(name="output", description="Select console or html output", format_error=_OUTPUT_ERROR)
def output(shell: Shell, args: list[str]) -> None:
    if not args:
        raise ValueError("missing argument")
    if args[0] == "console":
        shell.html_output = False
    elif args[0] == "html":
        shell.html_output = True
    else:
        raise ValueError(f"unknown output {args[0]!r}")


@command(
    name="asciiArt",
    description="Render the image with the current settings",
    format_error=_ART_ERROR,
)
def ascii_art(shell: Shell, args: list[str]) -> None:
    if len(shell.table) < 2:
        shell.write(_CHARSET_TOO_SMALL)
        return
    matrix = shell.compositor.run(shell.image, shell.resolution, shell.table, shell.reverse)
    try:
        shell.make_output().out(matrix)
    except OSError as e:
        logger.warning("Output failed: %s", e)
        shell.write(_OUTPUT_WRITE_ERROR)
