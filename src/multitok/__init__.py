"""Rule-based and statistical sentence segmentation and tokenization.

The package splits text into paragraphs, sentences and tokens and records the
half-open character span of every unit in the input text.  The public entry
point is :func:`multitok.annotate.annotate`; the command line interface lives
in :mod:`multitok.cli`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
