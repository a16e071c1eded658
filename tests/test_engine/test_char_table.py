"""Tests for the character brightness table."""

from __future__ import annotations

import numpy as np
import pytest

from asciiart.engine.char_table import CharBrightnessTable, TableState, mask_coverage
from tests.conftest import FakeGlyphs, coverage_mask


def test_mask_coverage():
    assert mask_coverage(coverage_mask(0.3)) == pytest.approx(0.3)
    assert mask_coverage(np.zeros((4, 4), dtype=bool)) == 0.0


def test_mask_coverage_rejects_empty():
    with pytest.raises(ValueError):
        mask_coverage(np.zeros((0, 0), dtype=bool))


def test_add_computes_raw_once(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs)
    table.add(".")
    table.add(".")
    assert dot_at_glyphs.calls == ["."]
    assert table.raw_brightness(".") == pytest.approx(0.1)
    assert len(table) == 1


def test_add_existing_keeps_lookup(digit_glyphs):
    table = CharBrightnessTable(digit_glyphs, "0123")
    before = table.normalized()
    table.add("2")
    assert table.state is TableState.CLEAN
    assert table.normalized() == before


def test_state_transitions(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs, ".@")
    assert table.state is TableState.DIRTY
    table.nearest(0.5)
    assert table.state is TableState.CLEAN
    table.remove("@")
    assert table.state is TableState.DIRTY
    table.bounds()
    assert table.state is TableState.CLEAN


def test_members_sorted_and_no_rebuild(digit_glyphs):
    table = CharBrightnessTable(digit_glyphs, "@9.0")
    assert table.members() == [".", "0", "9", "@"]
    assert table.state is TableState.DIRTY


def test_remove_missing_is_noop(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs, ".@")
    table.nearest(0.0)
    table.remove("x")
    assert table.state is TableState.CLEAN
    assert table.members() == [".", "@"]


def test_normalization_endpoints(digit_glyphs):
    table = CharBrightnessTable(digit_glyphs, "0123456789")
    norm = table.normalized()
    assert min(norm) == 0.0
    assert max(norm) == 1.0
    assert norm[0.0] == "0"
    assert norm[1.0] == "9"


def test_normalization_follows_mutation(digit_glyphs):
    table = CharBrightnessTable(digit_glyphs, "0123456789")
    table.remove("0")
    table.remove("9")
    assert table.bounds() == (0.0, 1.0)
    norm = table.normalized()
    assert norm[0.0] == "1"
    assert norm[1.0] == "8"
    table.add("@")
    assert table.normalized()[1.0] == "@"


def test_degenerate_single_member(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs, "@")
    assert table.bounds() == (0.0, 0.0)
    assert table.nearest(0.7) == "@"


def test_degenerate_all_tied():
    glyphs = FakeGlyphs({"a": 0.5, "b": 0.5})
    table = CharBrightnessTable(glyphs, "ab")
    norm = table.normalized()
    assert list(norm) == [0.0]
    # Both remain members; the later insert owns the shared key
    assert table.members() == ["a", "b"]
    assert table.nearest(0.3) == "b"


def test_custom_degenerate_value():
    glyphs = FakeGlyphs({"a": 0.5})
    table = CharBrightnessTable(glyphs, "a", degenerate_brightness=0.5)
    assert table.bounds() == (0.5, 0.5)


def test_colliding_keys_last_insert_wins():
    glyphs = FakeGlyphs({"a": 0.1, "b": 0.5, "c": 0.5, "d": 0.9})
    table = CharBrightnessTable(glyphs, "abcd")
    assert table.nearest(0.5) == "c"
    assert len(table.normalized()) == 3
    assert table.members() == ["a", "b", "c", "d"]


def test_nearest_exact_key(digit_glyphs):
    table = CharBrightnessTable(digit_glyphs, "0123456789")
    for key, char in table.normalized().items():
        assert table.nearest(key) == char


def test_nearest_picks_closer():
    glyphs = FakeGlyphs({"a": 0.0, "b": 0.4, "c": 1.0})
    table = CharBrightnessTable(glyphs, "abc")
    assert table.nearest(0.15) == "a"
    assert table.nearest(0.3) == "b"
    assert table.nearest(0.75) == "c"


def test_nearest_tie_prefers_floor():
    glyphs = FakeGlyphs({"a": 0.0, "b": 0.5, "c": 1.0})
    table = CharBrightnessTable(glyphs, "abc")
    assert table.nearest(0.25) == "a"
    assert table.nearest(0.75) == "b"


def test_nearest_outside_range(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs, ".@")
    assert table.nearest(-0.5) == "."
    assert table.nearest(1.5) == "@"


def test_empty_table_reads_raise(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs)
    assert table.normalized() == {}
    assert table.state is TableState.CLEAN
    with pytest.raises(ValueError):
        table.bounds()
    with pytest.raises(ValueError):
        table.nearest(0.5)


def test_add_rejects_multi_char(dot_at_glyphs):
    table = CharBrightnessTable(dot_at_glyphs)
    with pytest.raises(ValueError):
        table.add("ab")


def test_mask_shape_must_match():
    def provider(c: str) -> np.ndarray:
        return coverage_mask(0.5, side=10 if c == "a" else 8)

    table = CharBrightnessTable(provider, "a")
    with pytest.raises(ValueError):
        table.add("b")
    assert table.members() == ["a"]
