import pytest

from multitok.segment.base import Span
from multitok.utils.errors import OverlapError, SpanOutOfBoundsError
from multitok.utils.textspan import (
    ensure_strictly_increasing,
    ensure_within,
    strip_span,
)


def test_ensure_strictly_increasing() -> None:
    ensure_strictly_increasing([Span(0, 2), Span(2, 4), Span(5, 6)])
    with pytest.raises(OverlapError):
        ensure_strictly_increasing([Span(0, 3), Span(2, 4)])
    with pytest.raises(OverlapError):
        ensure_strictly_increasing([Span(4, 5), Span(0, 1)], what="token")


def test_ensure_within() -> None:
    ensure_within([Span(2, 4)], Span(2, 10))
    ensure_within([Span(0, 3)], (0, 3))
    with pytest.raises(SpanOutOfBoundsError):
        ensure_within([Span(1, 11)], Span(2, 10))


def test_strip_span() -> None:
    text = "  abc \n"
    assert strip_span(text, 0, len(text)) == (2, 5)
    assert strip_span("   ", 0, 3) == (3, 3)
