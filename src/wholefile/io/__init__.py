"""Shape based registry for whole-file reads.

Three readers are registered by default, keyed by the shape of their result:
``"bytes"``, ``"text"`` and ``"lines"``.  The registry only dispatches; all
reading, decoding and line splitting happens in :mod:`wholefile.io.readers`.

``UnsupportedShapeError`` is raised when asking for a shape that has no
registered reader.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from ..utils.errors import UnsupportedShapeError
from .readers import read_all_bytes, read_all_lines, read_all_to_string

ReaderFunc = Callable[[str | os.PathLike[str]], Any]

SHAPES: tuple[str, ...] = ("bytes", "text", "lines")

_READERS: dict[str, ReaderFunc] = {}


def register_reader(shape: str, func: ReaderFunc) -> None:
    """Register ``func`` as the reader for ``shape``.

    Parameters
    ----------
    shape:
        Name of the output shape.  Matching is case-insensitive.
    func:
        Callable taking a path and returning the file content in that shape.
    """

    _READERS[shape.lower()] = func


def get_reader(shape: str) -> ReaderFunc:
    """Return the reader registered for ``shape``.

    Raises
    ------
    UnsupportedShapeError
        If no reader is registered for ``shape``.
    """

    reader = _READERS.get(shape.lower())
    if reader is None:
        raise UnsupportedShapeError(f"Unsupported output shape: '{shape}'") from None
    return reader


def read_file(path: str | os.PathLike[str], shape: str = "text") -> Any:
    """Read ``path`` with the reader registered for ``shape``."""

    return get_reader(shape)(path)


register_reader("bytes", read_all_bytes)
register_reader("text", read_all_to_string)
register_reader("lines", read_all_lines)

__all__ = [
    "ReaderFunc",
    "SHAPES",
    "register_reader",
    "get_reader",
    "read_file",
    "read_all_bytes",
    "read_all_to_string",
    "read_all_lines",
]
