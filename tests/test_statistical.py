"""Tests for the spaCy-backed segmenter and tokenizer."""

from __future__ import annotations

from typing import Any

import pytest

from multitok.annotate.annotator import annotate
from multitok.segment.base import SentenceSegmenter, Span, Tokenizer
from multitok.segment.statistical import SpacyModel, SpacySegmenter, SpacyTokenizer, load_model
from multitok.utils.errors import ModelError, ResourceLoadError


class _BrokenPipeline:
    def __init__(self) -> None:
        self.pipes: list[str] = []

    def has_pipe(self, name: str) -> bool:
        return name in self.pipes

    def add_pipe(self, name: str) -> None:
        self.pipes.append(name)

    def __call__(self, text: str) -> Any:
        raise RuntimeError("boom")

    def make_doc(self, text: str) -> Any:
        raise RuntimeError("boom")


def test_model_errors_are_wrapped() -> None:
    nlp = _BrokenPipeline()
    model = SpacyModel(nlp, language="en", model_name="broken")
    assert nlp.pipes == ["sentencizer"]
    with pytest.raises(ModelError):
        SpacySegmenter(model).segment("Hello there.")
    with pytest.raises(ModelError):
        SpacyTokenizer(model).tokenize("Hello there.")


def test_missing_model() -> None:
    pytest.importorskip("spacy")
    with pytest.raises(ResourceLoadError):
        load_model("en", "definitely_not_an_installed_model")


@pytest.fixture()
def blank_model() -> SpacyModel:
    spacy = pytest.importorskip("spacy")
    return SpacyModel(spacy.blank("en"), language="en", model_name="blank:en")


def test_segmenter_offsets(blank_model: SpacyModel) -> None:
    seg = SpacySegmenter(blank_model)
    assert isinstance(seg, SentenceSegmenter)
    assert seg.name() == "statistical"
    assert seg.segment("Hello world. This is it.") == [Span(0, 12), Span(13, 24)]


def test_tokenizer_offsets(blank_model: SpacyModel) -> None:
    tok = SpacyTokenizer(blank_model)
    assert isinstance(tok, Tokenizer)
    assert tok.language == "en"
    assert tok.tokenize("Hello,  world!") == [Span(0, 5), Span(5, 6), Span(8, 13), Span(13, 14)]


def test_statistical_annotation(blank_model: SpacyModel) -> None:
    text = "Hello world. This is it.\n\nNext."
    result = annotate(text, "en", SpacySegmenter(blank_model), SpacyTokenizer(blank_model))
    assert result.provenance.engine == "statistical"
    assert len(result.paragraphs) == 2
    for tok in result.tokens():
        assert text[tok.start : tok.end] == tok.text
