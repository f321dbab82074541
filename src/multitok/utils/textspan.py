"""Utility functions for working with text spans.

The helpers in this module are pure and framework agnostic.  Spans are
represented as half-open intervals ``[start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  Boundary touching spans therefore do not overlap.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from multitok.utils.errors import OverlapError, SpanOutOfBoundsError

if TYPE_CHECKING:  # pragma: no cover
    from multitok.segment.base import Span


def ensure_strictly_increasing(spans: Sequence[Span], *, what: str = "span") -> None:
    """Ensure sibling ``spans`` are ordered and do not overlap.

    Unlike a sort-then-check, the caller's order is validated as given.
    Raises :class:`OverlapError` on the first offending pair.
    """

    for prev, cur in zip(spans, spans[1:]):
        if cur.start < prev.end:
            msg = f"{what}s out of order or overlapping: {prev} and {cur}"
            raise OverlapError(msg)


def ensure_within(spans: Iterable[Span], outer: Span | tuple[int, int], *, what: str = "span") -> None:
    """Ensure every span lies inside ``outer``.

    Raises :class:`SpanOutOfBoundsError` for the first span escaping ``outer``.
    """

    lo, hi = outer if isinstance(outer, tuple) else (outer.start, outer.end)
    for span in spans:
        if span.start < lo or span.end > hi:
            msg = f"{what} {span} outside [{lo}, {hi})"
            raise SpanOutOfBoundsError(msg)


def strip_span(text: str, start: int, end: int) -> tuple[int, int]:
    """Return ``(start, end)`` narrowed past surrounding whitespace."""

    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


__all__ = [
    "ensure_strictly_increasing",
    "ensure_within",
    "strip_span",
]
