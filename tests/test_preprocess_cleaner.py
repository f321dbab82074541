"""Tests for character cleanup and line joining."""

from __future__ import annotations

from multitok.preprocess.cleaner import clean, join_lines


def test_soft_hyphen_removed() -> None:
    res = clean("co\u00adoperate")
    assert res.text == "cooperate"
    assert res.changed
    assert res.char_map == (0, 1, 3, 4, 5, 6, 7, 8, 9)


def test_nfc_composition() -> None:
    res = clean("cafe\u0301")
    assert res.text == "caf\u00e9"
    assert res.char_map == (0, 1, 2, 3)


def test_nbsp_and_zero_width() -> None:
    assert clean("A\u00a0B").text == "A B"
    assert clean("A\u200bB\ufeff").text == "AB"


def test_zwj_and_layout_controls_kept() -> None:
    text = "\U0001F468\u200d\U0001F469\tx\r\n"
    res = clean(text)
    assert res.text == text
    assert not res.changed


def test_other_controls_dropped() -> None:
    assert clean("a\x07b\x00c").text == "abc"


def test_char_map_non_decreasing() -> None:
    res = clean("x\u00ady\u0301\u200bz")
    assert list(res.char_map) == sorted(res.char_map)
    assert len(res.char_map) == len(res.text)


def test_join_lines_marks_paragraphs() -> None:
    lines = ["Hello  world.\n", "   ", "Second\u00a0para.\r\n"]
    assert join_lines(lines) == "Hello  world.\n\nSecond para."
    assert join_lines([]) == ""
