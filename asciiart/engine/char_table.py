"""CharBrightnessTable — the live character set and its brightness lookup.

Each member keeps its raw coverage brightness (fraction of "on" cells in its
glyph mask). Lookups work on a normalized view where the darkest member is 0
and the brightest is 1. The normalized view is rebuilt lazily: any add/remove
moves the table to DIRTY, and every read passes through ``_ensure_clean()``.
"""

from __future__ import annotations

import bisect
import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

GlyphMaskProvider = Callable[[str], NDArray[np.bool_]]


class TableState(enum.Enum):
    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class CharEntry:
    char: str
    raw_brightness: float


def mask_coverage(mask: NDArray[np.bool_]) -> float:
    """Fraction of true cells in a boolean glyph mask."""
    arr = np.asarray(mask, dtype=bool)
    if arr.size == 0:
        raise ValueError("Glyph mask is empty")
    return float(np.count_nonzero(arr)) / arr.size


class CharBrightnessTable:
    """Character set with nearest-brightness lookup."""

    def __init__(
        self,
        mask_provider: GlyphMaskProvider,
        chars: Iterable[str] = (),
        degenerate_brightness: float = 0.0,
    ) -> None:
        self._mask_provider = mask_provider
        self._degenerate = degenerate_brightness
        self._entries: dict[str, CharEntry] = {}
        self._mask_shape: tuple[int, ...] | None = None
        self._keys: list[float] = []
        self._chars: list[str] = []
        self._state = TableState.DIRTY
        for c in chars:
            self.add(c)

    # ── Mutation ──

    def add(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        if char in self._entries:
            return
        mask = np.asarray(self._mask_provider(char), dtype=bool)
        if self._mask_shape is None:
            self._mask_shape = mask.shape
        elif mask.shape != self._mask_shape:
            raise ValueError(
                f"Glyph mask for {char!r} has shape {mask.shape}, expected {self._mask_shape}"
            )
        self._entries[char] = CharEntry(char, mask_coverage(mask))
        self._state = TableState.DIRTY

    def remove(self, char: str) -> None:
        if char not in self._entries:
            return
        del self._entries[char]
        self._state = TableState.DIRTY

    # ── Reads ──

    @property
    def state(self) -> TableState:
        return self._state

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, char: object) -> bool:
        return char in self._entries

    def members(self) -> list[str]:
        """Current characters by ascending code point. Does not rebuild."""
        return sorted(self._entries)

    def raw_brightness(self, char: str) -> float:
        return self._entries[char].raw_brightness

    def normalized(self) -> dict[float, str]:
        """Snapshot of the normalized brightness → character mapping, ascending."""
        self._ensure_clean()
        return dict(zip(self._keys, self._chars))

    def bounds(self) -> tuple[float, float]:
        """(min, max) normalized brightness. Raises on an empty table."""
        self._ensure_clean()
        if not self._keys:
            raise ValueError("Character table is empty")
        return self._keys[0], self._keys[-1]

    def nearest(self, brightness: float) -> str:
        """Character whose normalized brightness is closest to ``brightness``.

        On an exact tie between the floor and ceiling entries the floor
        (darker) character wins.
        """
        self._ensure_clean()
        keys = self._keys
        if not keys:
            raise ValueError("Character table is empty")

        hi = bisect.bisect_left(keys, brightness)
        if hi < len(keys) and keys[hi] == brightness:
            return self._chars[hi]
        lo = hi - 1

        if lo < 0:
            return self._chars[hi]
        if hi >= len(keys):
            return self._chars[lo]
        if abs(brightness - keys[lo]) <= abs(brightness - keys[hi]):
            return self._chars[lo]
        return self._chars[hi]

    # ── Normalization ──

    def _ensure_clean(self) -> None:
        if self._state is TableState.DIRTY:
            self._rebuild()

    def _rebuild(self) -> None:
        by_key: dict[float, str] = {}
        if self._entries:
            raws = [e.raw_brightness for e in self._entries.values()]
            lo, hi = min(raws), max(raws)
            span = hi - lo
            # Insertion order: a later member overwrites an equal key
            for entry in self._entries.values():
                if span == 0:
                    norm = self._degenerate
                else:
                    norm = (entry.raw_brightness - lo) / span
                by_key[norm] = entry.char

        keys = sorted(by_key)
        self._keys = keys
        self._chars = [by_key[k] for k in keys]
        self._state = TableState.CLEAN
        logger.debug(
            "Rebuilt brightness table: %d members, %d distinct keys",
            len(self._entries),
            len(keys),
        )
