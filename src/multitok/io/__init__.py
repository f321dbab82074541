"""Extension based registry for file I/O.

Readers turn a file into a string; renderers turn an
:class:`~multitok.annotate.model.AnnotationResult` into a document string.
``.txt`` input plus ``.json`` and ``.txt`` output are registered by default.
The registry dispatches on the file extension, or on an explicit format name
for :func:`render`.

``UnsupportedFormatError`` is raised when no handler matches.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..annotate.model import AnnotationResult
from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.json_writer import render_json
from .writers.txt_writer import render_text, write_text

RendererFunc = Callable[[AnnotationResult], str]

_READERS: dict[str, Callable[..., str]] = {}
_RENDERERS: dict[str, RendererFunc] = {}


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".txt"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_renderer(ext: str, func: RendererFunc) -> None:
    """Register a document renderer for files ending with ``ext``."""

    _RENDERERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def formats() -> tuple[str, ...]:
    """Return the registered output format names (extensions without dot)."""

    return tuple(sorted(ext.lstrip(".") for ext in _RENDERERS))


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def render(result: AnnotationResult, fmt: str) -> str:
    """Render ``result`` in format ``fmt`` (``"json"``, ``"txt"``, ...)."""

    renderer = _RENDERERS.get("." + fmt.lower().lstrip("."))
    if renderer is None:
        raise UnsupportedFormatError(f"Unsupported output format: '{fmt}'") from None
    return renderer(result)


def write_document(path: str | os.PathLike[str], result: AnnotationResult, **kwargs: Any) -> None:
    """Render ``result`` according to the extension of ``path`` and write it.

    Parameters
    ----------
    path:
        Destination file path.
    result:
        Annotation to persist.
    **kwargs:
        Additional keyword arguments forwarded to :func:`write_text`.

    Raises
    ------
    UnsupportedFormatError
        If no renderer is registered for the file extension.
    """

    ext = get_extension(path)
    renderer = _RENDERERS.get(ext)
    if renderer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    write_text(path, renderer(result), **kwargs)


register_reader(".txt", read_text)
register_renderer(".json", render_json)
register_renderer(".txt", render_text)

__all__ = [
    "RendererFunc",
    "register_reader",
    "register_renderer",
    "get_extension",
    "formats",
    "read_file",
    "render",
    "write_document",
]
