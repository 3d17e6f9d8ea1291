"""Typed exceptions for whole-file reads.

I/O failures are not wrapped: :class:`OSError` and its subclasses raised by
``open``/``read`` reach the caller unchanged.  Only content level failures get a
dedicated type here.
"""

from __future__ import annotations

import os


class IOFormatError(ValueError):
    """Base class for content and format related errors."""


class InvalidEncodingError(IOFormatError):
    """Raised when a fully read buffer is not valid UTF-8.

    ``start`` and ``end`` are byte offsets of the offending sequence within the
    file.  The raw bytes are intentionally not attached; callers who need them
    should use :func:`wholefile.read_all_bytes`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        start: int,
        end: int,
        reason: str,
    ) -> None:
        self.path = os.fspath(path)
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"{self.path}: invalid UTF-8 at byte {start}: {reason}")

    @classmethod
    def from_decode_error(
        cls, path: str | os.PathLike[str], exc: UnicodeDecodeError
    ) -> "InvalidEncodingError":
        """Build an instance from the codec's :class:`UnicodeDecodeError`."""

        return cls(path, start=exc.start, end=exc.end, reason=exc.reason)


class UnsupportedShapeError(IOFormatError):
    """Raised when no reader is registered for an output shape."""


__all__ = ["IOFormatError", "InvalidEncodingError", "UnsupportedShapeError"]
