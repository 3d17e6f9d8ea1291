r"""Deterministic file-content fuzzing utilities.

The helpers in this module build file payloads together with the line list a
correct reader must return for them.  They focus on the places where whole-file
readers tend to be brittle:

* ``\n``, ``\r\n`` and mixed line endings
* presence or absence of a trailing terminator
* empty lines and empty files
* lone ``\r`` characters inside a line
* multi-byte UTF-8 content
* invalid UTF-8 sequences injected at arbitrary byte offsets

All choices are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Literal

_ALPHABET = "abcxyzABC 019\t-_.éß中文\U0001f600"

# Each of these is invalid no matter which bytes surround it.
_INVALID_SEQUENCES = [b"\xff", b"\xfe", b"\xc0\xaf", b"\xed\xa0\x80"]


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`make_sample`.

    ``max_variants`` controls how many samples :func:`samples` yields.
    """

    max_variants: int = 50
    max_lines: int = 12
    max_line_length: int = 20
    empty_line_prob: float = 0.15
    lone_cr_prob: float = 0.1
    trailing_terminator_prob: float = 0.5
    eol_style: Literal["mixed", "lf", "crlf"] = "mixed"


@dataclass(slots=True, frozen=True)
class FuzzSample:
    """Encoded file content and the lines it must split into."""

    data: bytes
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def _random_line(rng: random.Random, opts: FuzzOptions) -> str:
    if rng.random() < opts.empty_line_prob:
        return ""
    length = rng.randint(1, opts.max_line_length)
    chars = [rng.choice(_ALPHABET) for _ in range(length)]
    # A lone CR is content only when something follows it on the same line.
    if length > 1 and rng.random() < opts.lone_cr_prob:
        chars.insert(rng.randint(0, length - 1), "\r")
    return "".join(chars)


def _terminator(rng: random.Random, style: Literal["mixed", "lf", "crlf"]) -> str:
    if style == "lf":
        return "\n"
    if style == "crlf":
        return "\r\n"
    return "\r\n" if rng.random() < 0.5 else "\n"


def make_sample(*, seed: int, opts: FuzzOptions) -> FuzzSample:
    """Return a random but reproducible :class:`FuzzSample`."""

    rng = rng_from_seed(seed)
    lines = [_random_line(rng, opts) for _ in range(rng.randint(0, opts.max_lines))]
    if not lines:
        return FuzzSample(data=b"", lines=())

    trailing = rng.random() < opts.trailing_terminator_prob or lines[-1] == ""
    out: list[str] = []
    for i, line in enumerate(lines):
        out.append(line)
        if i < len(lines) - 1 or trailing:
            out.append(_terminator(rng, opts.eol_style))
    return FuzzSample(data="".join(out).encode("utf-8"), lines=tuple(lines))


def corrupt_utf8(data: bytes, rng: random.Random) -> bytes:
    """Insert an invalid UTF-8 sequence at a random offset of ``data``."""

    idx = rng.randint(0, len(data))
    return data[:idx] + rng.choice(_INVALID_SEQUENCES) + data[idx:]


def samples(*, base_seed: int, opts: FuzzOptions) -> Iterable[FuzzSample]:
    """Yield deterministic samples for seeds ``base_seed`` onwards."""

    for i in range(opts.max_variants):
        yield make_sample(seed=base_seed + i, opts=opts)


__all__ = [
    "FuzzOptions",
    "FuzzSample",
    "rng_from_seed",
    "make_sample",
    "corrupt_utf8",
    "samples",
]
