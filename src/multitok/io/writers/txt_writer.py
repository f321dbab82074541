"""Plain-text writer.

:func:`render_text` lays out an annotation the way tokenizers traditionally
print it: one sentence per line with tokens separated by single spaces and an
empty line between paragraphs.  Offsets are not preserved in this format.

:func:`write_text` stores any rendered document on disk.
"""

from __future__ import annotations

import os
from pathlib import Path

from multitok.annotate.model import AnnotationResult

PathLikeStr = os.PathLike[str]


def render_text(result: AnnotationResult) -> str:
    """Render ``result`` as tokenized text."""

    blocks = []
    for para in result.paragraphs:
        lines = [" ".join(tok.text for tok in sent.tokens) for sent in para.sentences]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n" if blocks else ""


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write a rendered document to ``path``, creating parent directories.

    ``newline=""`` keeps the ``\\n`` separators produced by the renderers
    untranslated on every platform.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["render_text", "write_text"]
