from dataclasses import FrozenInstanceError

import pytest

from multitok.annotate.model import AnnotationResult, Paragraph, Provenance, Sentence, Token
from multitok.segment.base import SentenceSegmenter, Span, Tokenizer
from multitok.utils.errors import SpanOutOfBoundsError


def test_span_fields_and_length() -> None:
    span = Span(2, 6)
    assert span.length == 4
    assert span.slice("abcdefgh") == "cdef"
    assert span.shift(3) == Span(5, 9)


def test_span_ordering() -> None:
    assert sorted([Span(4, 5), Span(0, 2), Span(0, 1)]) == [Span(0, 1), Span(0, 2), Span(4, 5)]


def test_span_immutable() -> None:
    span = Span(0, 1)
    with pytest.raises(FrozenInstanceError):
        span.start = 1  # type: ignore[misc]


@pytest.mark.parametrize("start,end", [(-1, 2), (5, 5), (3, 1)])
def test_span_validation(start: int, end: int) -> None:
    with pytest.raises(SpanOutOfBoundsError):
        Span(start, end)


def test_span_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Span(1, 0)


class _Whole:
    def name(self) -> str:
        return "whole"

    def segment(self, paragraph: str) -> list[Span]:
        return [Span(0, len(paragraph))]

    def tokenize(self, sentence: str) -> list[Span]:
        return [Span(0, len(sentence))]


def test_protocols_are_structural() -> None:
    engine = _Whole()
    assert isinstance(engine, SentenceSegmenter)
    assert isinstance(engine, Tokenizer)


def test_result_iterators_and_provenance() -> None:
    text = "Hi. Yo."
    s1 = Sentence(Span(0, 3), (Token(Span(0, 2), "Hi"), Token(Span(2, 3), ".")))
    s2 = Sentence(Span(4, 7), (Token(Span(4, 6), "Yo"), Token(Span(6, 7), ".")))
    prov = Provenance(language="en", segmenter="rule", tokenizer="rule")
    result = AnnotationResult(text, (Paragraph(Span(0, 7), (s1, s2)),), prov)
    assert list(result.sentences()) == [s1, s2]
    assert [t.text for t in result.tokens()] == ["Hi", ".", "Yo", "."]
    assert prov.engine == "rule"
    assert Provenance("en", "rule", "statistical").engine == "mixed"
    assert prov.version == "0.1.0"
