"""Sentence segmenters, tokenizers and the offset mapper they share."""

from .base import SentenceSegmenter, Span, Tokenizer
from .sentences import RuleBasedSegmenter, SegmenterRules
from .span_mapper import Edit, SpanMapper, WorkingCopy
from .tokenizer import RuleBasedTokenizer, TokenizerRules

__all__ = [
    "Edit",
    "RuleBasedSegmenter",
    "RuleBasedTokenizer",
    "SegmenterRules",
    "SentenceSegmenter",
    "Span",
    "SpanMapper",
    "Tokenizer",
    "TokenizerRules",
    "WorkingCopy",
]
