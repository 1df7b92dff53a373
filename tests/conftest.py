"""Shared pytest fixtures and configuration for the numcat test suite.

Guidelines
----------
* Core tests use in-memory sinks and sources only.
* Files are created under ``tmp_path``; tests never depend on OS state.
* Process streams are substituted with ``monkeypatch`` and captured with
  ``capsysbinary``.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


class RecordingSink:
    """In-memory :class:`~numcat.core.protocols.OutputSink` that logs calls.

    ``events`` interleaves ``("write", data)`` and ``("flush", None)``
    entries so ordering against other events can be asserted.
    """

    def __init__(self, events: list[tuple[str, object]] | None = None) -> None:
        self.events: list[tuple[str, object]] = events if events is not None else []
        self.buffer = io.BytesIO()
        self.flushes: int = 0

    def write(self, data: bytes) -> int:
        self.events.append(("write", bytes(data)))
        return self.buffer.write(data)

    def flush(self) -> None:
        self.flushes += 1
        self.events.append(("flush", None))

    def getvalue(self) -> bytes:
        return self.buffer.getvalue()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory writing *content* to ``tmp_path / name``."""

    def _make(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], None]:
    """Replace ``sys.stdin`` with a stream yielding the given bytes."""

    def _install(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _install


@pytest.fixture
def make_sink() -> type[RecordingSink]:
    """The :class:`RecordingSink` class, for tests sharing an event log."""
    return RecordingSink
