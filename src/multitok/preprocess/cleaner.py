"""Safe, deterministic character cleanup.

:func:`clean` removes characters that only get in the way of segmentation
while keeping every visible character and all line breaks.  An offset
``char_map`` is returned so that spans computed on the cleaned text can be
related back to the raw input.  The CLI does not use it: the annotated text is
the cleaned one, it is written to the JSON document as ``text`` and every
offset in the output refers to it.

Rules
-----
The following transforms are applied in order:

1. **Unicode NFC** – canonical composition.  Decomposed accents become single
   code points, so a token never starts with a stray combining mark.
2. **Whitespace rationalization** – no-break spaces become regular spaces and
   zero-width characters are dropped.  Tabs and runs of spaces stay.
3. **Soft hyphen removal** – ``\\u00ad`` is deleted.
4. **Control characters** – C0/C1 controls other than tab, newline and
   carriage return are deleted.

``char_map`` contract
---------------------
``char_map[i]`` gives the index of the source character that produced
``text[i]``.  Indices never decrease; characters produced from one composed
cluster share its starting index.

Example
-------

>>> clean("A\\u00a0B")
CleanResult(text='A B', char_map=(0, 1, 2), changed=True)
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from typing import List, Tuple

__all__ = ["CleanResult", "clean", "join_lines"]

_NBSP_EQUIVALENTS = {
    "\u00a0",  # NO-BREAK SPACE
    "\u202f",  # NARROW NO-BREAK SPACE
    "\u2007",  # FIGURE SPACE
}

# ZWJ is kept: it glues emoji sequences together.
_ZERO_WIDTHS = {
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u2060",  # WORD JOINER
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE
}

_KEPT_CONTROLS = {"\t", "\n", "\r"}


@dataclass(slots=True, frozen=True)
class CleanResult:
    """Result of :func:`clean`.

    Attributes
    ----------
    text:
        The cleaned text.
    char_map:
        ``char_map[i]`` gives the index in the original input that produced
        ``text[i]``.  The mapping is non-decreasing.
    changed:
        ``True`` if the cleaned text differs from the input.
    """

    text: str
    char_map: Tuple[int, ...]
    changed: bool


def _nfc_with_map(text: str) -> tuple[List[str], List[int]]:
    """Normalize ``text`` to NFC while building an offset map.

    A base character is grouped with its following combining marks and the
    group is normalized as a whole; every produced character maps to the start
    of its group.
    """

    out_chars: List[str] = []
    out_map: List[int] = []
    i = 0
    while i < len(text):
        start = i
        cluster = [text[i]]
        i += 1
        while i < len(text) and unicodedata.combining(text[i]):
            cluster.append(text[i])
            i += 1
        normalized = unicodedata.normalize("NFC", "".join(cluster))
        for ch in normalized:
            out_chars.append(ch)
            out_map.append(start)
    return out_chars, out_map


def _is_dropped_control(ch: str) -> bool:
    return ch not in _KEPT_CONTROLS and unicodedata.category(ch) == "Cc"


def clean(text: str) -> CleanResult:
    """Clean ``text`` and return a :class:`CleanResult`."""

    chars, mapping = _nfc_with_map(text)

    out_chars: List[str] = []
    out_map: List[int] = []
    for ch, idx in zip(chars, mapping):
        if ch in _ZERO_WIDTHS or ch == "\u00ad" or _is_dropped_control(ch):
            continue
        if ch in _NBSP_EQUIVALENTS:
            ch = " "
        out_chars.append(ch)
        out_map.append(idx)

    cleaned = "".join(out_chars)
    return CleanResult(cleaned, tuple(out_map), cleaned != text)


def join_lines(lines: Iterable[str]) -> str:
    """Clean ``lines`` and join them with ``\\n``.

    Trailing line breaks are removed first and whitespace-only lines become
    empty, so blank lines surface as ``"\\n\\n"``, the default paragraph
    delimiter.

    The per-line ``char_map`` is discarded; offsets computed on the joined
    string refer to the cleaned text.
    """

    out: list[str] = []
    for line in lines:
        line = clean(line.rstrip("\r\n")).text
        out.append("" if not line.strip() else line)
    return "\n".join(out)
