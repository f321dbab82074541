"""Plain-text input.

:func:`read_text` loads a file exactly as stored: newline sequences are not
translated and a UTF-8 byte-order mark is consumed by the default
``"utf-8-sig"`` codec.  :func:`read_stream` does the same for an already open
text stream such as standard input.  Cleaning and line joining happen later
in :mod:`multitok.preprocess.cleaner`.
"""

from __future__ import annotations

import os
from typing import TextIO

PathLikeStr = os.PathLike[str]

_BOM = "\ufeff"


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the contents of ``path`` without newline translation.

    ``FileNotFoundError``, ``UnicodeDecodeError`` and other I/O errors
    propagate to the caller.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def read_stream(stream: TextIO) -> str:
    """Read all of ``stream`` dropping a leading byte-order mark."""

    text = stream.read()
    return text[1:] if text.startswith(_BOM) else text


__all__ = ["read_text", "read_stream"]
