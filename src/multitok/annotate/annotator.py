"""Annotation assembly.

The annotator splits a text into paragraphs on an explicit delimiter, asks the
configured :class:`~multitok.segment.base.SentenceSegmenter` for sentence spans
and the configured :class:`~multitok.segment.base.Tokenizer` for token spans,
shifts both into text coordinates and assembles the immutable result.

Only the protocols are used here, so rule-based and statistical engines (or a
mix of both) are interchangeable.  Spans returned by the engines are validated
rather than repaired: an out-of-bounds or overlapping span raises a
:class:`~multitok.utils.errors.MalformedSpanError` subclass and no partial
result is produced.
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from multitok.segment.base import SentenceSegmenter, Span, Tokenizer
from multitok.utils.logging import get_logger
from multitok.utils.textspan import ensure_strictly_increasing, ensure_within, strip_span

from .model import AnnotationResult, Paragraph, Provenance, Sentence, Token

__all__ = ["DEFAULT_PARAGRAPH_DELIMITER", "Annotator", "annotate", "split_paragraphs"]

_LOG = get_logger(__name__)

DEFAULT_PARAGRAPH_DELIMITER = "\n\n"


def split_paragraphs(text: str, delimiter: str = DEFAULT_PARAGRAPH_DELIMITER) -> list[Span]:
    """Return trimmed, non-empty paragraph spans of ``text``.

    ``delimiter`` itself never belongs to a paragraph.  Whitespace-only chunks
    between delimiters are dropped.
    """

    if not delimiter:
        raise ValueError("paragraph delimiter must not be empty")
    spans: list[Span] = []
    pos = 0
    while True:
        idx = text.find(delimiter, pos)
        end = len(text) if idx < 0 else idx
        start, stop = strip_span(text, pos, end)
        if start < stop:
            spans.append(Span(start, stop))
        if idx < 0:
            return spans
        pos = idx + len(delimiter)


class Annotator:
    """Run a segmenter and tokenizer over texts and assemble results."""

    def __init__(
        self,
        segmenter: SentenceSegmenter,
        tokenizer: Tokenizer,
        *,
        language: str,
        paragraph_delimiter: str = DEFAULT_PARAGRAPH_DELIMITER,
    ) -> None:
        if not paragraph_delimiter:
            raise ValueError("paragraph delimiter must not be empty")
        self._segmenter = segmenter
        self._tokenizer = tokenizer
        self._delimiter = paragraph_delimiter
        self._provenance = Provenance(
            language=language,
            segmenter=segmenter.name(),
            tokenizer=tokenizer.name(),
        )

    @property
    def provenance(self) -> Provenance:
        return self._provenance

    def annotate(self, text: str) -> AnnotationResult:
        """Annotate ``text`` and return a new :class:`AnnotationResult`."""

        paragraphs: list[Paragraph] = []
        for para_span in split_paragraphs(text, self._delimiter):
            sentences = self._sentences(text, para_span)
            if sentences:
                paragraphs.append(Paragraph(para_span, tuple(sentences)))
        _LOG.debug(
            "annotated %d chars: %d paragraphs, %d sentences",
            len(text),
            len(paragraphs),
            sum(len(p.sentences) for p in paragraphs),
        )
        return AnnotationResult(text, tuple(paragraphs), self._provenance)

    def annotate_many(self, texts: Iterable[str], *, workers: int = 1) -> list[AnnotationResult]:
        """Annotate independent ``texts``, preserving input order.

        Engines hold no mutable state, so texts can run on a thread pool
        without synchronization.
        """

        if workers <= 1:
            return [self.annotate(text) for text in texts]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.annotate, texts))

    def _sentences(self, text: str, para_span: Span) -> list[Sentence]:
        para_text = para_span.slice(text)
        sent_spans = [s.shift(para_span.start) for s in self._segmenter.segment(para_text)]
        ensure_within(sent_spans, para_span, what="sentence")
        ensure_strictly_increasing(sent_spans, what="sentence")

        sentences: list[Sentence] = []
        for sent_span in sent_spans:
            tok_spans = [
                t.shift(sent_span.start) for t in self._tokenizer.tokenize(sent_span.slice(text))
            ]
            if not tok_spans:
                continue
            ensure_within(tok_spans, sent_span, what="token")
            ensure_strictly_increasing(tok_spans, what="token")
            tokens = tuple(Token(span, span.slice(text)) for span in tok_spans)
            sentences.append(Sentence(Span(tok_spans[0].start, tok_spans[-1].end), tokens))
        return sentences


def annotate(
    text: str,
    language: str,
    segmenter: SentenceSegmenter,
    tokenizer: Tokenizer,
    *,
    paragraph_delimiter: str = DEFAULT_PARAGRAPH_DELIMITER,
) -> AnnotationResult:
    """Annotate ``text`` with the given engines.

    The caller chooses the engine variants and language; nothing here reads
    global configuration.
    """

    annotator = Annotator(
        segmenter,
        tokenizer,
        language=language,
        paragraph_delimiter=paragraph_delimiter,
    )
    return annotator.annotate(text)
