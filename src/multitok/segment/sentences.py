"""Rule-based sentence segmentation.

:class:`RuleBasedSegmenter` performs Moses-style sentence splitting.  A
*candidate* boundary follows a run of sentence-final punctuation (``.``,
``!``, ``?``, ``…``; runs such as ``?!`` or ``...`` count once) plus any closing
quotes or brackets, provided whitespace follows.  The candidate becomes a
boundary when the next token opens a sentence: an uppercase letter, an opening
quote or bracket (``¿``/``¡`` for Spanish) or, after a period, a digit.

Suppression and forcing rules are evaluated in a configurable precedence
order and the first rule with a verdict wins:

``hard_break``
    A blank line in the gap forces a boundary.  Blank lines without any
    terminator are boundaries as well while this rule is enabled.
``prefix``
    The word before a single period is a non-breaking prefix.  Numeric-only
    prefixes suppress the break only before a number (``No. 5``).
``acronym``
    Dotted uppercase acronyms (``U.S.``) never end a sentence.
``initial``
    A single uppercase letter followed by a period is treated as an initial.

Returned spans are relative to the paragraph and trimmed of surrounding
whitespace.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from multitok.resources.languages import LanguageProfile
from multitok.resources.prefixes import PrefixRuleSet
from multitok.utils.constants import CLOSING_CHARS, OPENING, is_numeric_token, ltrim_index
from multitok.utils.textspan import strip_span

from .base import Span

__all__ = ["DEFAULT_PRECEDENCE", "RULE_NAMES", "SegmenterRules", "RuleBasedSegmenter"]

RULE_NAMES: tuple[str, ...] = ("hard_break", "prefix", "acronym", "initial")
DEFAULT_PRECEDENCE: tuple[str, ...] = RULE_NAMES

_WS_RE = re.compile(r"\s*")


@dataclass(slots=True, frozen=True)
class SegmenterRules:
    """Rule precedence for the segmenter.

    Rules missing from ``precedence`` are disabled.
    """

    precedence: tuple[str, ...] = DEFAULT_PRECEDENCE

    def __post_init__(self) -> None:
        unknown = [name for name in self.precedence if name not in RULE_NAMES]
        if unknown:
            raise ValueError(f"unknown segmenter rules: {', '.join(unknown)}")
        if len(set(self.precedence)) != len(self.precedence):
            raise ValueError("segmenter rules must not repeat")


@dataclass(slots=True, frozen=True)
class _Candidate:
    word: str
    punct: str
    closers: str
    gap: str
    next_token: str


class RuleBasedSegmenter:
    """Split paragraphs into sentences using punctuation and prefix rules."""

    def __init__(
        self,
        prefixes: PrefixRuleSet,
        profile: LanguageProfile,
        rules: SegmenterRules | None = None,
    ) -> None:
        self._prefixes = prefixes
        self._profile = profile
        self._rules = rules or SegmenterRules()
        final = re.escape(profile.sentence_final)
        closers = re.escape(CLOSING_CHARS)
        self._candidate_re = re.compile(
            rf"(?P<punct>[{final}]+)(?P<close>[{closers}]*)(?=\s|$)|(?P<gap>\n[^\S\n]*\n)"
        )
        self._openers = OPENING | frozenset(profile.sentence_openers)
        table: dict[str, Callable[[_Candidate], bool | None]] = {
            "hard_break": self._hard_break_rule,
            "prefix": self._prefix_rule,
            "acronym": self._acronym_rule,
            "initial": self._initial_rule,
        }
        self._chain = tuple(table[name] for name in self._rules.precedence)
        self._hard_breaks = "hard_break" in self._rules.precedence

    def name(self) -> str:
        return "rule"

    @property
    def language(self) -> str:
        return self._profile.code

    # ------------------------------------------------------------------
    # Segmentation
    # ------------------------------------------------------------------
    def segment(self, paragraph: str) -> list[Span]:
        spans: list[Span] = []
        start = 0
        for cut, resume in self._boundaries(paragraph):
            s, e = strip_span(paragraph, start, cut)
            if s < e:
                spans.append(Span(s, e))
            start = resume
        s, e = strip_span(paragraph, start, len(paragraph))
        if s < e:
            spans.append(Span(s, e))
        return spans

    def _boundaries(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(cut, resume)`` pairs: sentence end and next sentence start."""

        n = len(text)
        pos = 0
        while pos < n:
            m = self._candidate_re.search(text, pos)
            if m is None:
                return
            if m.group("gap") is not None:
                ws_end = _WS_RE.match(text, m.start()).end()
                if self._hard_breaks:
                    yield m.start(), ws_end
                pos = ws_end
                continue
            cut = m.end()
            ws_end = _WS_RE.match(text, cut).end()
            if ws_end >= n:
                return
            if self._is_boundary(text, m, ws_end):
                yield cut, ws_end
            pos = ws_end

    def _is_boundary(self, text: str, m: re.Match[str], ws_end: int) -> bool:
        word_start = m.start()
        while word_start > 0 and not text[word_start - 1].isspace():
            word_start -= 1
        word_start = ltrim_index(text, word_start, m.start())
        next_end = ws_end
        while next_end < len(text) and not text[next_end].isspace():
            next_end += 1
        cand = _Candidate(
            word=text[word_start : m.start()],
            punct=m.group("punct"),
            closers=m.group("close"),
            gap=text[m.end() : ws_end],
            next_token=text[ws_end:next_end],
        )
        for rule in self._chain:
            verdict = rule(cand)
            if verdict is not None:
                return verdict
        return self._opens_sentence(cand)

    def _opens_sentence(self, cand: _Candidate) -> bool:
        ch = cand.next_token[0]
        if ch.isupper() or ch.istitle() or ch in self._openers:
            return True
        return ch.isdigit() and "." in cand.punct

    # ------------------------------------------------------------------
    # Rules: True forces a break, False suppresses it, None abstains
    # ------------------------------------------------------------------
    def _hard_break_rule(self, cand: _Candidate) -> bool | None:
        return True if cand.gap.count("\n") >= 2 else None

    def _prefix_rule(self, cand: _Candidate) -> bool | None:
        if cand.punct != "." or cand.closers or not cand.word:
            return None
        entry = self._prefixes.lookup(cand.word)
        if entry is None:
            return None
        if not entry.numeric_exception:
            return False
        return False if is_numeric_token(cand.next_token) else None

    def _acronym_rule(self, cand: _Candidate) -> bool | None:
        if cand.punct != ".":
            return None
        head, dot, tail = cand.word.rpartition(".")
        if dot and head and tail and all(ch.isupper() or ch == "-" for ch in tail):
            return False
        return None

    def _initial_rule(self, cand: _Candidate) -> bool | None:
        if not self._profile.uppercase_initials or cand.punct != ".":
            return None
        if len(cand.word) == 1 and cand.word.isupper():
            return False
        return None
