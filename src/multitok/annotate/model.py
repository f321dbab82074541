"""Immutable annotation model.

All entities are frozen dataclasses holding tuples.  They are produced once by
the :class:`~multitok.annotate.annotator.Annotator` and never mutated;
re-annotating a text yields a new :class:`AnnotationResult`.  Spans are
expressed in code-point offsets of :attr:`AnnotationResult.text`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from multitok import __version__
from multitok.segment.base import Span


@dataclass(slots=True, frozen=True)
class Token:
    """A leaf span and its surface text."""

    span: Span
    text: str

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end


@dataclass(slots=True, frozen=True)
class Sentence:
    """A sentence spanning exactly its tokens."""

    span: Span
    tokens: tuple[Token, ...]


@dataclass(slots=True, frozen=True)
class Paragraph:
    """A paragraph and its sentences."""

    span: Span
    sentences: tuple[Sentence, ...]


@dataclass(slots=True, frozen=True)
class Provenance:
    """Which engines and language produced an annotation."""

    language: str
    segmenter: str
    tokenizer: str
    version: str = __version__

    @property
    def engine(self) -> str:
        """Single engine label, or ``"mixed"`` when the variants differ."""

        return self.segmenter if self.segmenter == self.tokenizer else "mixed"


@dataclass(slots=True, frozen=True)
class AnnotationResult:
    """Paragraphs of one input text plus provenance."""

    text: str
    paragraphs: tuple[Paragraph, ...]
    provenance: Provenance

    def sentences(self) -> Iterator[Sentence]:
        for paragraph in self.paragraphs:
            yield from paragraph.sentences

    def tokens(self) -> Iterator[Token]:
        for sentence in self.sentences():
            yield from sentence.tokens


__all__ = ["Token", "Sentence", "Paragraph", "Provenance", "AnnotationResult"]
