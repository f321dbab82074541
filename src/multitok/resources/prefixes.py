"""Non-breaking prefix lists.

Resource files use the Moses layout: one prefix per line, ``#`` starts a
comment and a trailing ``#NUMERIC_ONLY#`` marker flags prefixes that only
prevent a break before a number (``No. 5``).  Files are packaged as
``multitok/resources/data/nonbreaking_prefix.<lang>`` and parsed once per
language; the resulting :class:`PrefixRuleSet` is immutable and shared.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources as importlib_resources
from types import MappingProxyType

from multitok.utils.errors import ResourceLoadError, UnsupportedLanguageError
from multitok.utils.logging import get_logger

__all__ = [
    "PrefixEntry",
    "PrefixRuleSet",
    "parse_prefixes",
    "load_prefixes",
    "available_languages",
]

_LOG = get_logger(__name__)
_DATA_PACKAGE = "multitok.resources.data"
_FILE_PREFIX = "nonbreaking_prefix."
_NUMERIC_MARKER = "#NUMERIC_ONLY#"


@dataclass(slots=True, frozen=True)
class PrefixEntry:
    """A single abbreviation entry."""

    prefix: str
    numeric_exception: bool = False


class PrefixRuleSet:
    """Read-only lookup table of non-breaking prefixes for one language."""

    __slots__ = ("_language", "_entries")

    def __init__(self, entries: Iterable[PrefixEntry], *, language: str = "") -> None:
        table: dict[str, PrefixEntry] = {}
        for entry in entries:
            table[entry.prefix] = entry
        self._language = language
        self._entries: Mapping[str, PrefixEntry] = MappingProxyType(table)

    @property
    def language(self) -> str:
        return self._language

    def lookup(self, token: str) -> PrefixEntry | None:
        """Return the entry for ``token`` with one trailing period removed.

        Matching is exact and case sensitive.
        """

        if token.endswith("."):
            token = token[:-1]
        return self._entries.get(token)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PrefixEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"PrefixRuleSet(language={self._language!r}, size={len(self)})"


def parse_prefixes(lines: Iterable[str], *, language: str = "") -> PrefixRuleSet:
    """Parse Moses-style prefix lines into a :class:`PrefixRuleSet`.

    Raises :class:`ResourceLoadError` for lines holding more than one prefix.
    """

    entries: list[PrefixEntry] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        numeric = False
        if _NUMERIC_MARKER in line:
            numeric = True
            line = line.replace(_NUMERIC_MARKER, "")
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        if any(ch.isspace() for ch in line):
            raise ResourceLoadError(f"malformed prefix on line {lineno}: {raw.rstrip()!r}")
        entries.append(PrefixEntry(line, numeric))
    return PrefixRuleSet(entries, language=language)


def available_languages() -> tuple[str, ...]:
    """Return the language codes that ship a prefix resource."""

    root = importlib_resources.files(_DATA_PACKAGE)
    langs = [
        item.name[len(_FILE_PREFIX) :]
        for item in root.iterdir()
        if item.name.startswith(_FILE_PREFIX)
    ]
    return tuple(sorted(langs))


@lru_cache(maxsize=None)
def load_prefixes(language: str) -> PrefixRuleSet:
    """Load the packaged prefix list for ``language``.

    Raises :class:`UnsupportedLanguageError` when no resource exists and
    :class:`ResourceLoadError` when it cannot be decoded or parsed.
    """

    if not language.isalpha():
        raise UnsupportedLanguageError(f"invalid language code '{language}'")
    resource = importlib_resources.files(_DATA_PACKAGE).joinpath(_FILE_PREFIX + language)
    if not resource.is_file():
        raise UnsupportedLanguageError(f"no non-breaking prefix list for language '{language}'")
    try:
        with resource.open("r", encoding="utf-8") as fh:
            rules = parse_prefixes(fh, language=language)
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceLoadError(f"cannot read prefix list for '{language}': {exc}") from exc
    _LOG.info("loaded %d non-breaking prefixes for %s", len(rules), language)
    return rules
