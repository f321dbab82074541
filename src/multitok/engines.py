"""Engine construction from configuration.

The annotator never looks at configuration; this module is the single place
where a :class:`~multitok.config.ConfigModel` is turned into a segmenter and a
tokenizer.  Per-language resources are loaded here, once, before any text is
processed.
"""

from __future__ import annotations

from multitok.annotate.annotator import Annotator
from multitok.config import ConfigModel
from multitok.resources.languages import get_profile
from multitok.resources.prefixes import load_prefixes
from multitok.segment.base import SentenceSegmenter, Tokenizer
from multitok.segment.sentences import RuleBasedSegmenter, SegmenterRules
from multitok.segment.tokenizer import RuleBasedTokenizer, TokenizerRules
from multitok.utils.errors import UnsupportedLanguageError

__all__ = ["build_engines", "build_annotator"]


def _rule_engines(cfg: ConfigModel, language: str) -> tuple[SentenceSegmenter, Tokenizer]:
    profile = get_profile(language).with_overrides(
        split_hyphens=cfg.tokenizer.split_hyphens,
        uppercase_initials=cfg.segmenter.uppercase_initials,
    )
    prefixes = load_prefixes(language)
    segmenter = RuleBasedSegmenter(
        prefixes, profile, SegmenterRules(precedence=tuple(cfg.segmenter.precedence))
    )
    tokenizer = RuleBasedTokenizer(
        prefixes,
        profile,
        TokenizerRules(
            protect_urls=cfg.tokenizer.protect_urls,
            protect_numbers=cfg.tokenizer.protect_numbers,
            split_hyphens=cfg.tokenizer.split_hyphens,
        ),
    )
    return segmenter, tokenizer


def _statistical_engines(cfg: ConfigModel, language: str) -> tuple[SentenceSegmenter, Tokenizer]:
    from multitok.segment.statistical import SpacySegmenter, SpacyTokenizer, load_model

    model_name = cfg.statistical.models.get(language)
    if model_name is None:
        raise UnsupportedLanguageError(f"no statistical model configured for '{language}'")
    model = load_model(language, model_name)
    return SpacySegmenter(model), SpacyTokenizer(model)


def build_engines(
    cfg: ConfigModel, *, language: str | None = None, engine: str | None = None
) -> tuple[SentenceSegmenter, Tokenizer]:
    """Return the segmenter and tokenizer selected by ``cfg``.

    ``language`` and ``engine`` override the configured values.
    """

    language = language or cfg.language
    engine = engine or cfg.engine
    if engine == "statistical":
        return _statistical_engines(cfg, language)
    if engine != "rule":
        raise ValueError(f"unknown engine '{engine}'")
    return _rule_engines(cfg, language)


def build_annotator(
    cfg: ConfigModel, *, language: str | None = None, engine: str | None = None
) -> Annotator:
    """Return an :class:`Annotator` wired with the engines selected by ``cfg``."""

    language = language or cfg.language
    segmenter, tokenizer = build_engines(cfg, language=language, engine=engine)
    return Annotator(
        segmenter,
        tokenizer,
        language=language,
        paragraph_delimiter=cfg.paragraph_delimiter,
    )
