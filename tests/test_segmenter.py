"""Tests for the rule-based sentence segmenter."""

from __future__ import annotations

import pytest

from multitok.resources.languages import get_profile
from multitok.resources.prefixes import load_prefixes
from multitok.segment.base import Span
from multitok.segment.sentences import RuleBasedSegmenter, SegmenterRules


def segmenter(lang: str = "en", rules: SegmenterRules | None = None) -> RuleBasedSegmenter:
    return RuleBasedSegmenter(load_prefixes(lang), get_profile(lang), rules)


def texts(paragraph: str, seg: RuleBasedSegmenter | None = None) -> list[str]:
    seg = seg or segmenter()
    return [span.slice(paragraph) for span in seg.segment(paragraph)]


def test_simple_split() -> None:
    seg = segmenter()
    assert seg.segment("Dr. Smith arrived. He sat down.") == [Span(0, 18), Span(19, 31)]
    assert seg.name() == "rule"
    assert seg.language == "en"


def test_numeric_only_prefix_before_number() -> None:
    assert texts("See No. 5 for details. It works.") == [
        "See No. 5 for details.",
        "It works.",
    ]


def test_numeric_only_prefix_before_word() -> None:
    assert texts("Read Art. The end.") == ["Read Art.", "The end."]


def test_acronym() -> None:
    text = "He lives in the U.S. He works there."
    assert texts(text) == [text]


def test_initial() -> None:
    text = "Written by J. R. Tolkien in England."
    assert texts(text) == [text]


def test_punctuation_runs_and_ellipsis() -> None:
    assert texts("Really?! Yes. Wait... Go on.") == ["Really?!", "Yes.", "Wait...", "Go on."]


def test_closing_quote_stays_with_sentence() -> None:
    assert texts('He said "Stop." Then he left.') == ['He said "Stop."', "Then he left."]


def test_lowercase_continuation() -> None:
    text = "It costs 5 dollars. and more."
    assert texts(text) == [text]


def test_digit_opens_sentence_after_period() -> None:
    assert texts("The total was 5. 6 more came.") == ["The total was 5.", "6 more came."]


def test_hard_break_forces_boundary() -> None:
    assert texts("Stop.\n\nnext line") == ["Stop.", "next line"]
    assert texts("First line\n \nSecond line") == ["First line", "Second line"]


def test_single_newline_is_not_a_break() -> None:
    text = "First line\nsecond line"
    assert texts(text) == [text]


def test_precedence_without_hard_break() -> None:
    seg = segmenter(rules=SegmenterRules(precedence=("prefix", "acronym", "initial")))
    text = "First line\n\nsecond line"
    assert texts(text, seg) == [text]


def test_disabled_prefix_rule() -> None:
    seg = segmenter(rules=SegmenterRules(precedence=("hard_break",)))
    assert texts("Dr. Smith arrived.", seg) == ["Dr.", "Smith arrived."]


@pytest.mark.parametrize("precedence", [("bogus",), ("prefix", "prefix")])
def test_invalid_rules(precedence: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        SegmenterRules(precedence=precedence)


def test_spanish_inverted_marks() -> None:
    seg = segmenter("es")
    assert texts("¿Qué hora es? ¡Las tres! Sra. Pérez llegó.", seg) == [
        "¿Qué hora es?",
        "¡Las tres!",
        "Sra. Pérez llegó.",
    ]


def test_whitespace_is_trimmed() -> None:
    assert segmenter().segment("  Hello there.  ") == [Span(2, 14)]


@pytest.mark.parametrize("paragraph", ["", "   ", "\n\n"])
def test_empty_paragraph(paragraph: str) -> None:
    assert segmenter().segment(paragraph) == []


def test_terminator_at_end_only() -> None:
    assert texts("No terminator here") == ["No terminator here"]
