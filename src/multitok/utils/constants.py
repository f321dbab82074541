"""Shared character tables and helpers for the segmenter and tokenizer."""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "CLOSING_CHARS",
    "OPENING_CHARS",
    "APOSTROPHES",
    "RIGHT_TRIM_CHARS",
    "OPENING",
    "RIGHT_TRIM",
    "PLACEHOLDER_FIRST",
    "PLACEHOLDER_LAST",
    "is_placeholder",
    "is_word_char",
    "is_numeric_token",
    "rtrim_index",
    "ltrim_index",
]

# Closing quotes/brackets absorbed into the preceding sentence.
CLOSING_CHARS: str = "\"')]}\u00bb\u201d\u2019\u203a"
# Characters that may open a sentence before its first letter.
OPENING_CHARS: str = "\"'([{\u00ab\u201c\u2018\u2039"
APOSTROPHES: str = "'\u2019"
RIGHT_TRIM_CHARS: str = ")]};:,.!?\u00bb\u201d\u2019\u203a\"'"

OPENING: frozenset[str] = frozenset(OPENING_CHARS)
RIGHT_TRIM: frozenset[str] = frozenset(RIGHT_TRIM_CHARS)

# Private-use block reserved for tokenizer placeholders.
PLACEHOLDER_FIRST = "\ue000"
PLACEHOLDER_LAST = "\ue0ff"


def is_placeholder(ch: str) -> bool:
    """Return ``True`` if ``ch`` lies in the placeholder block."""

    return PLACEHOLDER_FIRST <= ch <= PLACEHOLDER_LAST


def is_word_char(ch: str) -> bool:
    """Return ``True`` for characters that never get padded on their own.

    Letters, digits and combining marks build words; format characters such as
    zero-width joiners stay glued to their neighbours.
    """

    if ch.isalnum() or is_placeholder(ch):
        return True
    category = unicodedata.category(ch)
    return category.startswith("M") or category == "Cf"


def rtrim_index(text: str, end: int, start: int = 0) -> int:
    """Return ``end`` moved left past trailing ``RIGHT_TRIM`` characters."""

    while end > start and text[end - 1] in RIGHT_TRIM:
        end -= 1
    return end


def ltrim_index(text: str, start: int, end: int) -> int:
    """Return ``start`` moved right past leading ``OPENING`` characters."""

    while start < end and text[start] in OPENING:
        start += 1
    return start


_NUMERIC_RE = re.compile(r"\d+(?:[.,:/\-\u2013]\d+)*")


def is_numeric_token(token: str) -> bool:
    """Return ``True`` if ``token`` is a number once trailing punctuation is gone.

    Separated forms such as ``12,000`` and ranges such as ``10-12`` count.
    """

    core = token[: rtrim_index(token, len(token))]
    return _NUMERIC_RE.fullmatch(core) is not None
