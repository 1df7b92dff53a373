"""Infrastructure: process streams and file sources.

This module is the only place that touches ``sys.stdin``/``sys.stdout``
or opens files.  The streams are looked up at call time so tests can
substitute them.

Rules
-----
* No ``print()``; callers handle user-facing output.
* ``OSError`` from ``open()`` propagates; the core layer turns it into a
  per-file error.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from numcat.core.models import STDIN_NAME
from numcat.core.numbering import NumberedSink
from numcat.core.protocols import ByteSource, OutputSink


# ---------------------------------------------------------------------------
# Process streams
# ---------------------------------------------------------------------------

def stdin_source() -> BinaryIO:
    """Return the binary standard-input stream."""
    return sys.stdin.buffer


def stdout_sink() -> BinaryIO:
    """Return the buffered binary standard-output stream."""
    return sys.stdout.buffer


def open_output_sink(numbered: bool, stdout: OutputSink | None = None) -> OutputSink:
    """Select the output sink for a run.

    The plain standard-output stream when *numbered* is false, otherwise
    a :class:`NumberedSink` wrapping it.
    """
    output = stdout if stdout is not None else stdout_sink()
    if numbered:
        return NumberedSink(output)
    return output


# ---------------------------------------------------------------------------
# File sources
# ---------------------------------------------------------------------------

class FileSourceOpener:
    """Opens command-line file names for reading.

    ``-`` yields *stdin* (left open afterwards); any other name is
    opened in binary mode and closed once the caller is done with it.
    Repeating ``-`` simply reads the same stream again, which yields
    nothing once it is exhausted.
    """

    def __init__(self, stdin: ByteSource | None = None) -> None:
        self._stdin: ByteSource | None = stdin

    @contextmanager
    def open(self, name: str) -> Iterator[ByteSource]:
        if name == STDIN_NAME:
            yield self._stdin if self._stdin is not None else stdin_source()
            return
        with open(name, "rb") as handle:
            yield handle
