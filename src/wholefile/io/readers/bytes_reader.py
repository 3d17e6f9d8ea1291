"""Raw byte reader.

:func:`read_all_bytes` returns the complete on-disk content of a file.  The file
is opened in binary mode so no newline translation or decoding takes place.
``FileNotFoundError`` and other I/O errors propagate to the caller unchanged.
"""

from __future__ import annotations

import os

from ...utils.logging import get_logger

PathLikeStr = os.PathLike[str]

log = get_logger(__name__)


def read_all_bytes(path: str | PathLikeStr) -> bytes:
    """Read the file at ``path`` into a new :class:`bytes` object.

    Parameters
    ----------
    path:
        Path to the file on disk.

    Returns
    -------
    bytes
        The file contents exactly as stored.

    Raises
    ------
    OSError
        If the file cannot be opened or a read fails.  No partial buffer is
        returned.
    """

    with open(path, "rb") as f:
        data = f.read()
    log.debug("read %d bytes from %s", len(data), os.fspath(path))
    return data


__all__ = ["read_all_bytes"]
