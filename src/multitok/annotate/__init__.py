"""Paragraph/sentence/token annotation assembled from pluggable engines."""

from .annotator import Annotator, annotate, split_paragraphs
from .model import AnnotationResult, Paragraph, Provenance, Sentence, Token

__all__ = [
    "AnnotationResult",
    "Annotator",
    "Paragraph",
    "Provenance",
    "Sentence",
    "Token",
    "annotate",
    "split_paragraphs",
]
