"""Offset reconciliation between an original string and a rewritten copy.

The rule-based tokenizer never slices the original sentence directly.  It
builds a *working copy* in which protected substrings are replaced by single
placeholder characters and padding spaces are inserted around punctuation.
Every such change is recorded as an :class:`Edit`:

``Edit(orig_start, orig_end, work_start, work_end)``
    ``original[orig_start:orig_end]`` became ``working[work_start:work_end]``.
    Insertions have an empty original range.

Outside edits both strings advance in lockstep, so :class:`SpanMapper` maps a
working offset by locating the containing (or nearest preceding) edit and
extrapolating by the constant delta that edit leaves behind.  Offsets before
the first edit are identical in both strings.

Example
-------

>>> wc = WorkingCopy("a,b")
>>> wc.copy_to(1); wc.insert(" "); wc.copy_to(2); wc.insert(" "); wc.copy_to(3)
>>> wc.text
'a , b'
>>> wc.mapper().to_original(4)
2
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass

from multitok.utils.errors import MalformedSpanError, SpanOutOfBoundsError

from .base import Span

__all__ = ["Edit", "SpanMapper", "WorkingCopy"]


@dataclass(slots=True, frozen=True)
class Edit:
    """One substitution or insertion applied to the original string."""

    orig_start: int
    orig_end: int
    work_start: int
    work_end: int

    def __post_init__(self) -> None:
        if not (0 <= self.orig_start <= self.orig_end and 0 <= self.work_start <= self.work_end):
            raise SpanOutOfBoundsError(f"invalid edit {self}")

    @property
    def is_insertion(self) -> bool:
        return self.orig_start == self.orig_end


class SpanMapper:
    """Map working-string offsets back to original-string offsets."""

    __slots__ = ("_edits", "_work_starts")

    def __init__(self, edits: Sequence[Edit]) -> None:
        self._edits = tuple(edits)
        self._validate()
        self._work_starts = [e.work_start for e in self._edits]

    def _validate(self) -> None:
        prev_orig = 0
        prev_work = 0
        for edit in self._edits:
            if edit.orig_start < prev_orig or edit.work_start < prev_work:
                raise MalformedSpanError(f"edits out of order at {edit}")
            # Unedited stretches must have equal length in both strings.
            if edit.orig_start - prev_orig != edit.work_start - prev_work:
                raise MalformedSpanError(f"inconsistent gap before {edit}")
            prev_orig, prev_work = edit.orig_end, edit.work_end

    @property
    def edits(self) -> tuple[Edit, ...]:
        return self._edits

    def to_original(self, offset: int) -> int:
        """Return the original offset corresponding to working ``offset``.

        An offset at the start of an edit maps to the start of the edited
        original range, an offset at its end maps to the end.  Offsets strictly
        inside an insertion collapse onto the insertion point.
        """

        if offset < 0:
            raise SpanOutOfBoundsError(f"negative offset {offset}")
        idx = bisect_right(self._work_starts, offset) - 1
        if idx < 0:
            return offset
        edit = self._edits[idx]
        if offset >= edit.work_end:
            return edit.orig_end + (offset - edit.work_end)
        return min(edit.orig_start + (offset - edit.work_start), edit.orig_end)

    def to_original_span(self, start: int, end: int) -> Span:
        """Map the working range ``[start, end)`` to an original :class:`Span`."""

        return Span(self.to_original(start), self.to_original(end))

    def __len__(self) -> int:
        return len(self._edits)


class WorkingCopy:
    """Incrementally build a rewritten string together with its edit list.

    Callers consume the original left to right: :meth:`copy_to` copies
    unchanged characters, :meth:`substitute` replaces an original range and
    :meth:`insert` adds text without consuming anything.
    """

    def __init__(self, original: str) -> None:
        self.original = original
        self._parts: list[str] = []
        self._edits: list[Edit] = []
        self._orig_pos = 0
        self._work_pos = 0

    @property
    def position(self) -> int:
        """Next unconsumed index of the original string."""

        return self._orig_pos

    def copy_to(self, end: int) -> None:
        """Copy ``original[position:end]`` unchanged."""

        if end < self._orig_pos or end > len(self.original):
            raise SpanOutOfBoundsError(f"cannot copy to {end} from {self._orig_pos}")
        if end == self._orig_pos:
            return
        self._parts.append(self.original[self._orig_pos : end])
        self._work_pos += end - self._orig_pos
        self._orig_pos = end

    def insert(self, text: str) -> None:
        """Insert ``text`` at the current position."""

        if not text:
            return
        new_end = self._work_pos + len(text)
        last = self._edits[-1] if self._edits else None
        if (
            last is not None
            and last.is_insertion
            and last.orig_end == self._orig_pos
            and last.work_end == self._work_pos
        ):
            self._edits[-1] = Edit(last.orig_start, last.orig_end, last.work_start, new_end)
        else:
            self._edits.append(Edit(self._orig_pos, self._orig_pos, self._work_pos, new_end))
        self._parts.append(text)
        self._work_pos = new_end

    def substitute(self, end: int, replacement: str) -> None:
        """Replace ``original[position:end]`` with ``replacement``."""

        if end <= self._orig_pos or end > len(self.original):
            raise SpanOutOfBoundsError(f"cannot substitute [{self._orig_pos}, {end})")
        new_end = self._work_pos + len(replacement)
        self._edits.append(Edit(self._orig_pos, end, self._work_pos, new_end))
        self._parts.append(replacement)
        self._orig_pos = end
        self._work_pos = new_end

    def finish(self) -> None:
        """Copy whatever is left of the original."""

        self.copy_to(len(self.original))

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def mapper(self) -> SpanMapper:
        return SpanMapper(self._edits)
