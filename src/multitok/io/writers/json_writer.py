"""JSON document writer.

The document nests paragraphs, sentences and tokens and records the engine
provenance.  A flat ``wf`` (word form) list repeats every token with running
identifiers and its paragraph and sentence numbers, which is convenient for
consumers that want one record per token.

Layout::

    {
      "provenance": {"engine": "rule", "language": "en", ...},
      "text": "...",
      "paragraphs": [
        {"start": 0, "end": 18, "sentences": [
          {"start": 0, "end": 18, "tokens": [{"text": "Dr.", "start": 0, "end": 3}, ...]}
        ]}
      ],
      "wf": [{"id": "w1", "para": 1, "sent": 1, "offset": 0, "length": 3, "text": "Dr."}, ...]
    }
"""

from __future__ import annotations

import json
from typing import Any

from multitok.annotate.model import AnnotationResult

__all__ = ["to_document", "render_json"]


def to_document(result: AnnotationResult) -> dict[str, Any]:
    """Return a JSON-serializable mapping for ``result``."""

    prov = result.provenance
    paragraphs: list[dict[str, Any]] = []
    word_forms: list[dict[str, Any]] = []
    sent_no = 0
    for para_no, para in enumerate(result.paragraphs, start=1):
        sentences: list[dict[str, Any]] = []
        for sent in para.sentences:
            sent_no += 1
            tokens = []
            for tok in sent.tokens:
                tokens.append({"text": tok.text, "start": tok.start, "end": tok.end})
                word_forms.append(
                    {
                        "id": f"w{len(word_forms) + 1}",
                        "para": para_no,
                        "sent": sent_no,
                        "offset": tok.start,
                        "length": tok.span.length,
                        "text": tok.text,
                    }
                )
            sentences.append({"start": sent.span.start, "end": sent.span.end, "tokens": tokens})
        paragraphs.append({"start": para.span.start, "end": para.span.end, "sentences": sentences})
    return {
        "provenance": {
            "engine": prov.engine,
            "language": prov.language,
            "segmenter": prov.segmenter,
            "tokenizer": prov.tokenizer,
            "version": prov.version,
        },
        "text": result.text,
        "paragraphs": paragraphs,
        "wf": word_forms,
    }


def render_json(result: AnnotationResult, *, indent: int | None = 2) -> str:
    """Render ``result`` as a JSON string terminated by a newline."""

    return json.dumps(to_document(result), ensure_ascii=False, indent=indent) + "\n"
