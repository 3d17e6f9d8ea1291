"""The file handle is closed on every exit path."""

from __future__ import annotations

import builtins
import errno
import io
from pathlib import Path
from typing import Any

import pytest

from wholefile import InvalidEncodingError, read_all_bytes, read_all_lines, read_all_to_string
from wholefile.io.readers import bytes_reader


class _TrackingOpen:
    def __init__(self) -> None:
        self.handles: list[Any] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        handle = builtins.open(*args, **kwargs)
        self.handles.append(handle)
        return handle


class _FailingFile(io.BytesIO):
    def read(self, size: int | None = -1) -> bytes:
        raise OSError(errno.EIO, "Input/output error")


@pytest.fixture()
def tracking_open(monkeypatch: pytest.MonkeyPatch) -> _TrackingOpen:
    tracker = _TrackingOpen()
    monkeypatch.setattr(bytes_reader, "open", tracker, raising=False)
    return tracker


def test_closed_after_success(tmp_path: Path, tracking_open: _TrackingOpen) -> None:
    path = tmp_path / "ok.txt"
    path.write_bytes(b"a\nb\n")
    read_all_bytes(path)
    read_all_to_string(path)
    read_all_lines(path)
    assert len(tracking_open.handles) == 3
    assert all(h.closed for h in tracking_open.handles)


def test_closed_after_encoding_error(tmp_path: Path, tracking_open: _TrackingOpen) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff")
    with pytest.raises(InvalidEncodingError):
        read_all_to_string(path)
    with pytest.raises(InvalidEncodingError):
        read_all_lines(path)
    assert len(tracking_open.handles) == 2
    assert all(h.closed for h in tracking_open.handles)


def test_closed_after_read_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    handle = _FailingFile(b"partial")

    def fake_open(*args: Any, **kwargs: Any) -> _FailingFile:
        return handle

    monkeypatch.setattr(bytes_reader, "open", fake_open, raising=False)
    with pytest.raises(OSError) as excinfo:
        read_all_bytes("device.bin")
    assert excinfo.value.errno == errno.EIO
    assert handle.closed
