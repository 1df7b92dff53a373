"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these capabilities, never on ``sys`` streams
directly, so tests can drive it with in-memory buffers.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol


class OutputSink(Protocol):
    """Anything that accepts bytes and can be flushed.

    ``sys.stdout.buffer`` satisfies this structurally, as does
    :class:`~numcat.core.numbering.NumberedSink`.
    """

    def write(self, data: bytes, /) -> int:
        """Write *data*, returning the number of bytes accepted.

        Raises
        ------
        OSError
            When the underlying device rejects the write.
        """
        ...  # pragma: no cover

    def flush(self) -> None:
        """Push any buffered bytes to the underlying device."""
        ...  # pragma: no cover


class ByteSource(Protocol):
    """A readable binary stream such as an open file or ``sys.stdin.buffer``."""

    def read(self, size: int = -1, /) -> bytes:
        """Return up to *size* bytes; ``b""`` signals end of stream."""
        ...  # pragma: no cover

    def read1(self, size: int = -1, /) -> bytes:
        """Return up to *size* bytes from at most one underlying read.

        A pipe or terminal hands back whatever is available instead of
        blocking until *size* bytes have arrived.
        """
        ...  # pragma: no cover


class SourceOpener(Protocol):
    """Contract for turning a command-line file name into a byte source.

    Implementations decide what ``-`` means and how paths are opened.
    """

    def open(self, name: str) -> AbstractContextManager[ByteSource]:
        """Return a context manager yielding the source for *name*.

        Raises
        ------
        OSError
            When the file cannot be opened (missing, unreadable,
            a directory, ...).
        """
        ...  # pragma: no cover
