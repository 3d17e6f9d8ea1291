"""Convenience functions for loading a whole file into memory.

``read_all_bytes`` returns the raw content, ``read_all_to_string`` a strictly
validated UTF-8 string and ``read_all_lines`` the lines of that string with
their terminators removed.  The command line interface lives in
:mod:`wholefile.cli`.
"""

from .io import read_file
from .io.readers import read_all_bytes, read_all_lines, read_all_to_string, split_lines
from .utils.errors import InvalidEncodingError, IOFormatError, UnsupportedShapeError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "read_all_bytes",
    "read_all_to_string",
    "read_all_lines",
    "split_lines",
    "read_file",
    "IOFormatError",
    "InvalidEncodingError",
    "UnsupportedShapeError",
]
