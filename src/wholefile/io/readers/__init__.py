"""Whole-file readers, one module per output shape."""

from .bytes_reader import read_all_bytes
from .lines_reader import read_all_lines, split_lines
from .text_reader import decode_utf8, read_all_to_string

__all__ = [
    "read_all_bytes",
    "read_all_to_string",
    "read_all_lines",
    "decode_utf8",
    "split_lines",
]
