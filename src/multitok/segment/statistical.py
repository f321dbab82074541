"""spaCy-backed statistical segmenter and tokenizer.

The statistical variant delegates boundary decisions to a spaCy pipeline and
only translates its character offsets into :class:`~multitok.segment.base.Span`
objects.  The model is an opaque oracle: nothing here assumes where it places
boundaries, only that the offsets it reports are usable spans.

spaCy is imported on demand so that the rule-based engine never pays for it.
Unlike a best-effort detector there is no fallback: a missing package or model
raises :class:`ResourceLoadError`, and failures while processing text surface
as :class:`ModelError` instead of switching silently to the rule-based engine.
"""

from __future__ import annotations

from typing import Any

from multitok.utils.errors import ModelError, ResourceLoadError
from multitok.utils.logging import get_logger
from multitok.utils.textspan import strip_span

from .base import Span

__all__ = ["SpacyModel", "SpacySegmenter", "SpacyTokenizer", "load_model"]

_LOG = get_logger(__name__)
_SENTENCE_PIPES = ("parser", "senter", "sentencizer")


class SpacyModel:
    """A loaded spaCy pipeline shared read-only by segmenter and tokenizer."""

    def __init__(self, nlp: Any, *, language: str, model_name: str) -> None:
        self._nlp = nlp
        self.language = language
        self.model_name = model_name
        if not any(nlp.has_pipe(pipe) for pipe in _SENTENCE_PIPES):
            nlp.add_pipe("sentencizer")

    def sentences(self, text: str) -> list[tuple[int, int]]:
        """Return ``(start, end)`` character offsets of the sentences in ``text``."""

        try:
            doc = self._nlp(text)
            return [(sent.start_char, sent.end_char) for sent in doc.sents]
        except Exception as exc:
            raise ModelError(f"spaCy model '{self.model_name}' failed to segment: {exc}") from exc

    def tokens(self, text: str) -> list[tuple[int, int]]:
        """Return ``(start, end)`` offsets of non-whitespace tokens in ``text``."""

        try:
            doc = self._nlp.make_doc(text)
            return [(tok.idx, tok.idx + len(tok.text)) for tok in doc if not tok.is_space]
        except Exception as exc:
            raise ModelError(f"spaCy model '{self.model_name}' failed to tokenize: {exc}") from exc


def load_model(language: str, model_name: str) -> SpacyModel:
    """Load ``model_name`` for ``language``.

    Raises :class:`ResourceLoadError` when spaCy or the model is unavailable.
    """

    try:
        import spacy
    except Exception as exc:  # pragma: no cover - import guard
        raise ResourceLoadError(
            "spaCy is required for the statistical engine. "
            "Install with `pip install multitok[statistical]`."
        ) from exc
    try:
        nlp = spacy.load(model_name)
    except Exception as exc:
        raise ResourceLoadError(
            f"spaCy model '{model_name}' for '{language}' is not available"
        ) from exc
    _LOG.info("loaded spaCy model %s for %s", model_name, language)
    return SpacyModel(nlp, language=language, model_name=model_name)


def _to_spans(text: str, offsets: list[tuple[int, int]]) -> list[Span]:
    spans: list[Span] = []
    for start, end in offsets:
        start, end = strip_span(text, start, end)
        if start < end:
            spans.append(Span(start, end))
    return spans


class SpacySegmenter:
    """Sentence segmenter backed by a :class:`SpacyModel`."""

    def __init__(self, model: SpacyModel) -> None:
        self._model = model

    def name(self) -> str:
        return "statistical"

    @property
    def language(self) -> str:
        return self._model.language

    def segment(self, paragraph: str) -> list[Span]:
        return _to_spans(paragraph, self._model.sentences(paragraph))


class SpacyTokenizer:
    """Tokenizer backed by a :class:`SpacyModel`."""

    def __init__(self, model: SpacyModel) -> None:
        self._model = model

    def name(self) -> str:
        return "statistical"

    @property
    def language(self) -> str:
        return self._model.language

    def tokenize(self, sentence: str) -> list[Span]:
        return _to_spans(sentence, self._model.tokens(sentence))
