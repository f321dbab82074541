"""Per-language rule profiles.

A :class:`LanguageProfile` bundles the orthographic facts the rule-based
engine needs besides the prefix list: which characters close and open
sentences, how apostrophes inside words are treated and whether hyphenated
compounds are split.  Profiles are immutable module-level constants shared by
all engines.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType

from multitok.utils.errors import UnsupportedLanguageError

__all__ = [
    "ContractionRules",
    "LanguageProfile",
    "PROFILES",
    "SUPPORTED_LANGUAGES",
    "get_profile",
]


@dataclass(slots=True, frozen=True)
class ContractionRules:
    """Apostrophe handling inside words.

    Attributes
    ----------
    attach_between_letters:
        Keep ``letter'letter`` in one token (``don't``, ``John's``).
    attach_digit_s:
        Keep decade forms such as ``1990's`` in one token.
    """

    attach_between_letters: bool = True
    attach_digit_s: bool = False


@dataclass(slots=True, frozen=True)
class LanguageProfile:
    """Orthographic rules for one language."""

    code: str
    sentence_final: str = ".!?…"
    sentence_openers: str = ""
    contractions: ContractionRules = ContractionRules()
    split_hyphens: bool = False
    uppercase_initials: bool = True

    def with_overrides(
        self,
        *,
        split_hyphens: bool | None = None,
        uppercase_initials: bool | None = None,
    ) -> "LanguageProfile":
        """Return a copy with the non-``None`` overrides applied."""

        changes: dict[str, bool] = {}
        if split_hyphens is not None:
            changes["split_hyphens"] = split_hyphens
        if uppercase_initials is not None:
            changes["uppercase_initials"] = uppercase_initials
        return replace(self, **changes) if changes else self


PROFILES = MappingProxyType(
    {
        "en": LanguageProfile(
            code="en",
            contractions=ContractionRules(attach_between_letters=True, attach_digit_s=True),
        ),
        # Inverted marks open Spanish sentences and questions.
        "es": LanguageProfile(
            code="es",
            sentence_openers="¿¡",
            contractions=ContractionRules(attach_between_letters=True, attach_digit_s=False),
        ),
    }
)

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(sorted(PROFILES))


def get_profile(language: str) -> LanguageProfile:
    """Return the profile for ``language`` or raise ``UnsupportedLanguageError``."""

    try:
        return PROFILES[language]
    except KeyError:
        raise UnsupportedLanguageError(f"unsupported language '{language}'") from None
