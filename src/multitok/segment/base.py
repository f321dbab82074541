"""Core span model and the segmenter/tokenizer protocols.

Spans follow the half-open interval convention ``[start, end)`` and count
Unicode code points.  Segmenters and tokenizers return spans relative to the
string they were given; the annotator shifts them into text coordinates.  Any
implementation satisfying :class:`SentenceSegmenter` or :class:`Tokenizer` can
be plugged into the annotator, which never depends on a concrete variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from multitok.utils.errors import SpanOutOfBoundsError


@dataclass(slots=True, frozen=True, order=True)
class Span:
    """A non-empty half-open character range."""

    start: int
    end: int

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if self.start < 0 or self.end <= self.start:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start

    def shift(self, offset: int) -> "Span":
        """Return a copy moved right by ``offset`` characters."""

        return Span(self.start + offset, self.end + offset)

    def slice(self, text: str) -> str:
        """Return the substring of ``text`` covered by the span."""

        return text[self.start : self.end]


@runtime_checkable
class SentenceSegmenter(Protocol):
    """Protocol for sentence segmenters."""

    def name(self) -> str:
        """Return a short, stable identifier for the segmenter."""

        ...

    def segment(self, paragraph: str) -> list[Span]:
        """Split ``paragraph`` into ordered sentence spans.

        The paragraph never contains the paragraph delimiter.  Returned spans
        are relative to ``paragraph``, strictly increasing and non-overlapping.
        """

        ...


@runtime_checkable
class Tokenizer(Protocol):
    """Protocol for tokenizers."""

    def name(self) -> str:
        """Return a short, stable identifier for the tokenizer."""

        ...

    def tokenize(self, sentence: str) -> list[Span]:
        """Split ``sentence`` into ordered token spans relative to it."""

        ...
