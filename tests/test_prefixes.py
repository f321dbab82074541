"""Tests for non-breaking prefix parsing and loading."""

from __future__ import annotations

import pytest

from multitok.resources.prefixes import (
    PrefixEntry,
    available_languages,
    load_prefixes,
    parse_prefixes,
)
from multitok.utils.errors import ResourceLoadError, UnsupportedLanguageError


def test_parse_comments_and_numeric_marker() -> None:
    rules = parse_prefixes(
        ["# heading", "", "Dr", "No #NUMERIC_ONLY#", "etc # trailing comment"],
        language="xx",
    )
    assert len(rules) == 3
    assert rules.lookup("Dr") == PrefixEntry("Dr")
    assert rules.lookup("No.") == PrefixEntry("No", numeric_exception=True)
    assert "etc." in rules
    assert rules.language == "xx"


def test_lookup_is_exact_and_case_sensitive() -> None:
    rules = parse_prefixes(["Mr"])
    assert rules.lookup("mr") is None
    assert rules.lookup("Mr..") is None
    assert 5 not in rules


def test_malformed_line() -> None:
    with pytest.raises(ResourceLoadError):
        parse_prefixes(["two words"])


def test_load_english() -> None:
    rules = load_prefixes("en")
    assert "Mr." in rules
    assert "e.g." in rules
    entry = rules.lookup("No.")
    assert entry is not None and entry.numeric_exception
    assert load_prefixes("en") is rules


def test_load_spanish() -> None:
    rules = load_prefixes("es")
    assert "Sra." in rules
    assert "Nº" in rules


@pytest.mark.parametrize("code", ["xx", "../en", "e n", ""])
def test_unsupported_language(code: str) -> None:
    with pytest.raises(UnsupportedLanguageError):
        load_prefixes(code)


def test_available_languages() -> None:
    assert {"en", "es"}.issubset(available_languages())
