r"""Line reader.

Lines are delimited by ``\n``; a ``\r`` directly before the ``\n`` belongs to
the terminator and is dropped.  A lone ``\r`` is ordinary content, including a
``\r`` at the very end of the file.  A trailing terminator does not yield an
empty final line and an empty file yields no lines.

Example
-------
``split_lines("a\r\nb\n")`` returns ``["a", "b"]`` while
``split_lines("a\rb")`` returns ``["a\rb"]``.
"""

from __future__ import annotations

import os

from .text_reader import read_all_to_string

PathLikeStr = os.PathLike[str]


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines with their terminators removed."""

    if not text:
        return []
    parts = text.split("\n")
    # The last piece was not followed by "\n"; it is either the unterminated
    # final line or the empty remainder after a trailing terminator.
    tail = parts.pop()
    lines = [p[:-1] if p.endswith("\r") else p for p in parts]
    if tail:
        lines.append(tail)
    return lines


def read_all_lines(path: str | PathLikeStr) -> list[str]:
    """Read the file at ``path`` into a list of lines.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    InvalidEncodingError
        If the complete file content is not valid UTF-8.
    """

    return split_lines(read_all_to_string(path))


__all__ = ["read_all_lines", "split_lines"]
