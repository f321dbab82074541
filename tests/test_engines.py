from typing import Any

import pytest

from multitok.config import load_config
from multitok.engines import build_annotator, build_engines
from multitok.segment.sentences import RuleBasedSegmenter
from multitok.segment.tokenizer import RuleBasedTokenizer
from multitok.utils.errors import ResourceLoadError, UnsupportedLanguageError


def test_rule_engines() -> None:
    segmenter, tokenizer = build_engines(load_config(env={}), language="es")
    assert isinstance(segmenter, RuleBasedSegmenter)
    assert isinstance(tokenizer, RuleBasedTokenizer)
    assert segmenter.language == tokenizer.language == "es"


def test_config_reaches_rules(tmp_path: Any) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("tokenizer:\n  split_hyphens: true\n", encoding="utf-8")
    annotator = build_annotator(load_config(cfg_file, env={}))
    tokens = [t.text for t in annotator.annotate("well-known fact").tokens()]
    assert tokens == ["well", "-", "known", "fact"]


def test_unsupported_language() -> None:
    with pytest.raises(UnsupportedLanguageError):
        build_engines(load_config(env={}), language="fr")


def test_unknown_engine() -> None:
    with pytest.raises(ValueError):
        build_engines(load_config(env={}), engine="neural")


def test_statistical_without_configured_model() -> None:
    with pytest.raises(UnsupportedLanguageError):
        build_engines(load_config(env={}), language="fr", engine="statistical")


def test_statistical_load_failure(monkeypatch: Any) -> None:
    import multitok.segment.statistical as statistical

    def fail(language: str, model_name: str) -> None:
        raise ResourceLoadError(f"{model_name} missing")

    monkeypatch.setattr(statistical, "load_model", fail)
    with pytest.raises(ResourceLoadError):
        build_engines(load_config(env={}), engine="statistical")
