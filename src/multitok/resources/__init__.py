"""Per-language resources: non-breaking prefix lists and rule profiles."""

from .languages import SUPPORTED_LANGUAGES, ContractionRules, LanguageProfile, get_profile
from .prefixes import PrefixEntry, PrefixRuleSet, available_languages, load_prefixes, parse_prefixes

__all__ = [
    "SUPPORTED_LANGUAGES",
    "ContractionRules",
    "LanguageProfile",
    "PrefixEntry",
    "PrefixRuleSet",
    "available_languages",
    "get_profile",
    "load_prefixes",
    "parse_prefixes",
]
