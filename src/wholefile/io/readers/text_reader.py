"""Strict UTF-8 text reader.

The whole file is read as bytes first and only then decoded, so a truncated or
partially read file is never interpreted as text.  Unlike a plain ``open(...,
"r")`` this performs no newline translation and keeps a leading byte-order
mark: the returned string always encodes back to the exact file bytes.
"""

from __future__ import annotations

import os

from ...utils.errors import InvalidEncodingError
from .bytes_reader import read_all_bytes

PathLikeStr = os.PathLike[str]


def decode_utf8(data: bytes, path: str | PathLikeStr = "<bytes>") -> str:
    """Decode ``data`` as strict UTF-8.

    ``path`` is only used to label the error.

    Raises
    ------
    InvalidEncodingError
        If ``data`` is not valid UTF-8.
    """

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError.from_decode_error(path, exc) from exc


def read_all_to_string(path: str | PathLikeStr) -> str:
    """Read the file at ``path`` into a new string.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    InvalidEncodingError
        If the complete file content is not valid UTF-8.
    """

    return decode_utf8(read_all_bytes(path), path)


__all__ = ["decode_utf8", "read_all_to_string"]
