"""Rule-based tokenization over a protected working copy.

The tokenizer loosely follows the Moses tokenizer but never rewrites the text
it reports: all changes happen on a :class:`~multitok.segment.span_mapper.WorkingCopy`
whose edit list maps every token back to the original sentence.

Pipeline
--------
1. **Protect** – URLs, e-mail addresses, numbers with embedded separators
   (``3.14``, ``12,000``, ``05/01/2020``) and abbreviations ending in a period
   are replaced by one placeholder character each.  Placeholder characters
   already present in the input are protected as opaque units.
2. **Pad** – spaces are inserted around punctuation and symbols.  Periods,
   apostrophes and hyphens have dedicated rules: a word-final period is split
   off, runs of periods stay together, apostrophes inside words follow the
   language contraction table and hyphens are only split when enabled.
3. **Split** – the padded string is split on whitespace runs.
4. **Restore** – placeholders are expanded from the protection table.
5. **Map** – working offsets are mapped to sentence offsets and checked
   against the restored surface text.
"""

from __future__ import annotations

import re
import unicodedata
from bisect import bisect_left
from dataclasses import dataclass

from multitok.resources.languages import LanguageProfile
from multitok.resources.prefixes import PrefixRuleSet
from multitok.utils.constants import (
    APOSTROPHES,
    CLOSING_CHARS,
    PLACEHOLDER_FIRST,
    PLACEHOLDER_LAST,
    RIGHT_TRIM,
    is_numeric_token,
    is_word_char,
    ltrim_index,
)
from multitok.utils.errors import SurfaceMismatchError

from .base import Span
from .span_mapper import WorkingCopy

__all__ = ["Protection", "TokenizerRules", "RuleBasedTokenizer"]

_URL_RE = re.compile(r"(?<![\w@.+-])(?:(?:https?|ftp)://|www\.)[^\s<>\"]+", re.IGNORECASE)
_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
_NUMBER_RE = re.compile(r"\d+(?:[.,:/\-]\d+)+")
_OPAQUE_RE = re.compile(f"[{PLACEHOLDER_FIRST}-{PLACEHOLDER_LAST}]")
_DOTTED_RE = re.compile(r"[^\W\d_]+(?:\.[^\W\d_]+)+")
_NONSPACE_RE = re.compile(r"\S+")

_ABBREV_TRAILERS = CLOSING_CHARS + ",;:"

MARKERS = {
    "opaque": "\ue000",
    "url": "\ue001",
    "email": "\ue002",
    "number": "\ue003",
    "abbreviation": "\ue004",
}


@dataclass(slots=True, frozen=True)
class TokenizerRules:
    """Switches for the protection stage and hyphen handling.

    ``split_hyphens=None`` defers to the language profile.
    """

    protect_urls: bool = True
    protect_numbers: bool = True
    split_hyphens: bool | None = None


@dataclass(slots=True, frozen=True)
class Protection:
    """A protected substring of the sentence replaced by one placeholder."""

    start: int
    end: int
    kind: str


@dataclass(slots=True)
class _Unit:
    char: str
    start: int
    end: int
    protected: bool = False
    pad_before: bool = False
    pad_after: bool = False


class _ProtectionTable:
    """Ordered, non-overlapping protected ranges."""

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._items: list[Protection] = []

    def add(self, start: int, end: int, kind: str) -> bool:
        if end <= start:
            return False
        idx = bisect_left(self._starts, start)
        if idx > 0 and self._items[idx - 1].end > start:
            return False
        if idx < len(self._items) and self._items[idx].start < end:
            return False
        self._starts.insert(idx, start)
        self._items.insert(idx, Protection(start, end, kind))
        return True

    def items(self) -> list[Protection]:
        return list(self._items)


def _is_letter(ch: str) -> bool:
    return ch.isalpha() or unicodedata.category(ch).startswith("M")


def _url_end(text: str, start: int, end: int) -> int:
    """Trim trailing punctuation from a URL match.

    A closing parenthesis stays when it balances an opening one inside the
    URL, as in ``wiki/Moses_(tokenizer)``.
    """

    while end > start and text[end - 1] in RIGHT_TRIM:
        if text[end - 1] == ")" and text.count("(", start, end) >= text.count(")", start, end):
            break
        end -= 1
    return end


class RuleBasedTokenizer:
    """Split sentences into tokens with protect/pad/split/restore/map."""

    def __init__(
        self,
        prefixes: PrefixRuleSet,
        profile: LanguageProfile,
        rules: TokenizerRules | None = None,
    ) -> None:
        self._prefixes = prefixes
        self._profile = profile
        self._rules = rules or TokenizerRules()
        self._split_hyphens = (
            profile.split_hyphens if self._rules.split_hyphens is None else self._rules.split_hyphens
        )

    def name(self) -> str:
        return "rule"

    @property
    def language(self) -> str:
        return self._profile.code

    def tokenize(self, sentence: str) -> list[Span]:
        protections = self.protect(sentence)
        units = self._units(sentence, protections)
        self._mark_padding(units)

        working = WorkingCopy(sentence)
        for unit in units:
            if unit.pad_before:
                working.insert(" ")
            if unit.protected:
                working.copy_to(unit.start)
                working.substitute(unit.end, unit.char)
            else:
                working.copy_to(unit.end)
            if unit.pad_after:
                working.insert(" ")
        working.finish()

        mapper = working.mapper()
        restore = iter(protections)
        spans: list[Span] = []
        for match in _NONSPACE_RE.finditer(working.text):
            span = mapper.to_original_span(match.start(), match.end())
            parts: list[str] = []
            for ch in match.group():
                if ch in _MARKER_SET:
                    prot = next(restore, None)
                    if prot is None:
                        raise SurfaceMismatchError(f"unmatched placeholder in {match.group()!r}")
                    parts.append(sentence[prot.start : prot.end])
                else:
                    parts.append(ch)
            surface = "".join(parts)
            if surface != span.slice(sentence):
                raise SurfaceMismatchError(
                    f"token {surface!r} mapped to {span} ({span.slice(sentence)!r})"
                )
            spans.append(span)
        return spans

    # ------------------------------------------------------------------
    # Protect
    # ------------------------------------------------------------------
    def protect(self, sentence: str) -> list[Protection]:
        """Return the ordered protection table for ``sentence``."""

        table = _ProtectionTable()
        for m in _OPAQUE_RE.finditer(sentence):
            table.add(m.start(), m.end(), "opaque")
        if self._rules.protect_urls:
            for m in _URL_RE.finditer(sentence):
                table.add(m.start(), _url_end(sentence, m.start(), m.end()), "url")
            for m in _EMAIL_RE.finditer(sentence):
                table.add(m.start(), m.end(), "email")
        if self._rules.protect_numbers:
            for m in _NUMBER_RE.finditer(sentence):
                table.add(m.start(), m.end(), "number")
        chunks = list(_NONSPACE_RE.finditer(sentence))
        for idx, chunk in enumerate(chunks):
            start = ltrim_index(sentence, chunk.start(), chunk.end())
            end = chunk.end()
            while end > start and sentence[end - 1] in _ABBREV_TRAILERS:
                end -= 1
            following = chunks[idx + 1].group() if idx + 1 < len(chunks) else None
            if self._is_abbreviation(sentence[start:end], following):
                table.add(start, end, "abbreviation")
        return table.items()

    def _is_abbreviation(self, core: str, following: str | None) -> bool:
        if len(core) < 2 or not core.endswith(".") or core.endswith(".."):
            return False
        pre = core[:-1]
        entry = self._prefixes.lookup(pre)
        if entry is not None:
            if entry.numeric_exception:
                return following is None or is_numeric_token(following)
            return True
        if _DOTTED_RE.fullmatch(pre):
            return True
        return self._profile.uppercase_initials and len(pre) == 1 and pre.isupper()

    # ------------------------------------------------------------------
    # Pad
    # ------------------------------------------------------------------
    def _units(self, sentence: str, protections: list[Protection]) -> list[_Unit]:
        units: list[_Unit] = []
        pos = 0
        for prot in protections:
            units.extend(_Unit(sentence[i], i, i + 1) for i in range(pos, prot.start))
            units.append(_Unit(MARKERS[prot.kind], prot.start, prot.end, protected=True))
            pos = prot.end
        units.extend(_Unit(sentence[i], i, i + 1) for i in range(pos, len(sentence)))
        return units

    def _mark_padding(self, units: list[_Unit]) -> None:
        n = len(units)
        i = 0
        while i < n:
            unit = units[i]
            ch = unit.char
            if unit.protected or ch.isspace() or is_word_char(ch):
                i += 1
                continue
            prev = units[i - 1] if i > 0 else None
            nxt = units[i + 1] if i + 1 < n else None
            if ch == ".":
                run_end = i
                while run_end + 1 < n and units[run_end + 1].char == ".":
                    run_end += 1
                if run_end > i:
                    unit.pad_before = True
                    units[run_end].pad_after = True
                    i = run_end + 1
                    continue
                if (
                    prev is not None
                    and not prev.char.isspace()
                    and (nxt is None or nxt.char.isspace() or not self._word_like(nxt))
                ):
                    unit.pad_before = True
            elif ch in APOSTROPHES:
                if not self._attached_apostrophe(prev, nxt, units[i + 2] if i + 2 < n else None):
                    unit.pad_before = unit.pad_after = True
            elif ch == "-":
                if (
                    self._split_hyphens
                    and prev is not None
                    and nxt is not None
                    and (prev.protected or is_word_char(prev.char))
                    and (nxt.protected or is_word_char(nxt.char))
                ):
                    unit.pad_before = unit.pad_after = True
            else:
                unit.pad_before = unit.pad_after = True
            i += 1

    @staticmethod
    def _word_like(unit: _Unit) -> bool:
        return unit.protected or unit.char == "." or is_word_char(unit.char)

    def _attached_apostrophe(self, prev: _Unit | None, nxt: _Unit | None, after: _Unit | None) -> bool:
        if prev is None or nxt is None or prev.protected or nxt.protected:
            return False
        rules = self._profile.contractions
        if rules.attach_between_letters and _is_letter(prev.char) and _is_letter(nxt.char):
            return True
        return (
            rules.attach_digit_s
            and prev.char.isdigit()
            and nxt.char in "sS"
            and (after is None or not is_word_char(after.char))
        )


_MARKER_SET = frozenset(MARKERS.values())
