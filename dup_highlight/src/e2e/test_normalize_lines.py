# src/e2e/test_normalize_lines.py

import pytest

from dupfinder.models import Line
from dupfinder.normalize import normalize_line, is_empty, only_braces, split_lines, non_empty


@pytest.mark.parametrize("raw", ["  aa  =b;", "\tfoo( a, b )\t", "x", "", "   ", "a\tb c"])
def test_normalization_is_idempotent(raw):
    once = normalize_line(raw)
    assert normalize_line(once) == once


def test_spaces_removed_outer_whitespace_trimmed():
    assert normalize_line("  aa  =b;") == "aa=b;"
    assert normalize_line(" aa=b;") == normalize_line("   aa  =b;")
    # only the space character is removed inside a line
    assert normalize_line("\ta\tb c\t") == "a\tbc"
    assert normalize_line("x = 1;\r") == "x=1;"


def test_empty_lines():
    assert is_empty("")
    assert is_empty("   \t ")
    assert not is_empty(" } ")


def test_split_keeps_every_physical_line_and_index():
    lines = split_lines("a\n\n  b \n")
    assert [ln.index for ln in lines] == [0, 1, 2, 3]
    assert [ln.raw for ln in lines] == ["a", "", "  b ", ""]
    assert [ln.normalized for ln in lines] == ["a", "", "b", ""]
    assert split_lines("") == [Line(0, "", "")]


def test_non_empty_preserves_original_indices():
    kept = non_empty(split_lines("\nx\n   \ny"))
    assert [(ln.index, ln.normalized) for ln in kept] == [(1, "x"), (3, "y")]


def test_only_braces_predicate():
    assert only_braces(split_lines("{\n }\n{}"))
    assert not only_braces(split_lines("{\n x }"))
    assert not only_braces(split_lines("("))


def test_only_unicode_white_space_is_trimmed():
    # information separators are text, not whitespace
    assert normalize_line("\x1c\x1f") == "\x1c\x1f"
    assert not is_empty("\x1c")
    assert not only_braces(split_lines("{\x1d}"))
    ideographic = chr(0x3000)
    assert normalize_line(ideographic + "x;" + chr(0xA0)) == "x;"
    assert is_empty(chr(0x2028) + chr(0x85))


def test_separator_only_lines_take_part_in_matching():
    from dupfinder.engine import find_dup_lines
    assert find_dup_lines("\x1c\nx\n\x1c") == [[(0, 0), (2, 2)]]
