"""Typer-based command line interface for whole-file reads.

The ``show`` command reads a file with one of the registered readers and
prints the result: raw bytes, the decoded text, or one line per row.  Output is
written byte for byte; text is re-encoded as UTF-8 and never filtered.  Output
defaults come from :func:`wholefile.config.load_config`; command line options
win over configuration.

Exit codes
----------
0 success
2 usage error (including unknown output shapes)
3 I/O error (missing file, permission denied, read failure)
4 configuration error
5 encoding error (file is not valid UTF-8)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import get_reader
from .utils.errors import InvalidEncodingError, UnsupportedShapeError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="wholefile",
    help="Whole-file reader. Run 'wholefile show PATH' to print a file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    shape: str | None,
    line_numbers: bool | None,
    verbose: bool,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if shape is not None:
        new_cfg.output.shape = shape.lower()  # type: ignore[assignment]
    if line_numbers is not None:
        new_cfg.output.line_numbers = line_numbers
    if verbose:
        new_cfg.logging.level = "DEBUG"
    return new_cfg


def _emit(result: object, *, line_numbers: bool) -> None:
    # Content goes out byte for byte: no newline translation, no ANSI stripping.
    if isinstance(result, list):
        rows = [
            f"{number}\t{line}" if line_numbers else f"{line}"
            for number, line in enumerate(result, start=1)
        ]
        result = "".join(f"{row}\n" for row in rows)
    if not isinstance(result, bytes):
        result = str(result).encode("utf-8")
    stream = typer.get_binary_stream("stdout")
    stream.write(result)
    stream.flush()


@app.callback()
def main() -> None:
    """Entry point for the wholefile command group."""
    pass


@app.command()
def show(
    path: Path = typer.Argument(..., help="File to read"),  # noqa: B008
    shape: Optional[str] = typer.Option(  # noqa: B008
        None, "--as", help="Output shape [bytes|text|lines]"
    ),
    line_numbers: bool | None = typer.Option(  # noqa: B008
        None,
        "--line-numbers/--no-line-numbers",
        help="Prefix each line with its number (lines shape only)",
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log reads to stderr"
    ),
) -> None:
    """Read ``path`` in full and print it in the requested shape."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, (str(exc).splitlines() or [type(exc).__name__])[0])

    cfg = _apply_overrides(cfg, shape=shape, line_numbers=line_numbers, verbose=verbose)
    configure_logging(cfg.logging.level)
    log.debug("output shape %s", cfg.output.shape)

    try:
        reader = get_reader(cfg.output.shape)
    except UnsupportedShapeError as exc:
        _safe_exit(2, str(exc))

    try:
        result = reader(path)
    except InvalidEncodingError as exc:
        _safe_exit(5, str(exc))
    except OSError as exc:
        _safe_exit(3, str(exc))

    _emit(result, line_numbers=cfg.output.line_numbers)
