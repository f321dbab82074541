"""Typed exceptions for span validation, resource loading and I/O formats."""


class SpanError(ValueError):
    """Base class for span related errors."""


class MalformedSpanError(SpanError):
    """Raised when an engine produced a span violating the span invariants.

    This always signals an internal defect in a segmenter or tokenizer rule;
    output is never truncated or repaired to hide it.
    """


class OverlapError(MalformedSpanError):
    """Raised when two sibling spans overlap or are out of order."""


class SpanOutOfBoundsError(MalformedSpanError):
    """Raised when span coordinates are invalid or out of bounds."""


class SurfaceMismatchError(MalformedSpanError):
    """Raised when a mapped span does not reproduce the token surface text."""


class ConfigurationError(Exception):
    """Base class for fatal configuration errors reported to the caller."""


class UnsupportedLanguageError(ConfigurationError):
    """Raised when no resources exist for the requested language."""


class ResourceLoadError(ConfigurationError):
    """Raised when a prefix list or statistical model is missing or corrupt."""


class ModelError(ResourceLoadError):
    """Raised when a loaded statistical model fails while scoring text."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
