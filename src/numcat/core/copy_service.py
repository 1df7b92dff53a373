"""Core copy service — drives the concatenation run.

The service copies every file, in order, into a single
:class:`~numcat.core.protocols.OutputSink`.  A failure on one file is
turned into a :class:`~numcat.core.models.CopyError`, reported through a
callback and then skipped; it never stops the remaining files.

Guarantees
----------
* Output written before a failure is flushed before the failure is
  reported, so the two streams stay in order on a shared terminal.
* The sink is flushed once more after the last file.  A failed flush is
  fatal and raises :class:`~numcat.exceptions.OutputFlushError`.
* No ``print()`` and no ``sys`` access; sources come from the injected
  :class:`~numcat.core.protocols.SourceOpener`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from numcat.core.models import CopyError
from numcat.core.protocols import ByteSource, OutputSink, SourceOpener
from numcat.exceptions import OutputFlushError

COPY_CHUNK_SIZE: int = 64 * 1024
"""Bytes requested from a source per read."""


def copy_stream(
    source: ByteSource,
    sink: OutputSink,
    chunk_size: int = COPY_CHUNK_SIZE,
) -> int:
    """Copy *source* into *sink* until end of stream.

    Each chunk is whatever a single read returns, and the sink is
    flushed after every chunk, so input arriving line by line from a
    pipe or terminal is passed on as it comes.

    Returns the number of bytes copied.  Read, write and flush failures
    propagate as :class:`OSError`.
    """
    copied = 0
    while True:
        chunk = source.read1(chunk_size)
        if not chunk:
            return copied
        sink.write(chunk)
        sink.flush()
        copied += len(chunk)


class CopyService:
    """Copies named files into one output sink.

    Parameters
    ----------
    sink:
        Destination for every file's bytes.  Owned by the service for
        the whole run.
    opener:
        Resolves file names (including ``-``) to byte sources.
    chunk_size:
        Read size used by :func:`copy_stream`.
    """

    def __init__(
        self,
        sink: OutputSink,
        opener: SourceOpener,
        *,
        chunk_size: int = COPY_CHUNK_SIZE,
    ) -> None:
        self._sink: OutputSink = sink
        self._opener: SourceOpener = opener
        self._chunk_size: int = chunk_size

    # ------------------------------------------------------------------
    # Single file
    # ------------------------------------------------------------------

    def copy_file(self, name: str) -> CopyError | None:
        """Copy one file into the sink.

        Returns ``None`` on success, or a :class:`CopyError` naming
        *name* when opening, reading or writing failed.
        """
        try:
            with self._opener.open(name) as source:
                copy_stream(source, self._sink, self._chunk_size)
        except OSError as exc:
            return CopyError.from_os_error(name, exc)
        return None

    # ------------------------------------------------------------------
    # Whole run
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Flush the sink, raising :class:`OutputFlushError` on failure."""
        try:
            self._sink.flush()
        except OSError as exc:
            raise OutputFlushError(
                f"failed to flush output: {exc.strerror or exc}",
            ) from exc

    def run(
        self,
        files: Iterable[str],
        *,
        on_error: Callable[[CopyError], None],
    ) -> bool:
        """Copy every file in *files*, in order.

        Parameters
        ----------
        files:
            File names as given on the command line.
        on_error:
            Called with each :class:`CopyError`, after the sink has been
            flushed.

        Returns
        -------
        bool
            ``True`` when every file was copied without error.

        Raises
        ------
        OutputFlushError
            When the sink cannot be flushed.
        """
        ok = True
        for name in files:
            error = self.copy_file(name)
            if error is None:
                continue
            self.flush()
            on_error(error)
            ok = False
        self.flush()
        return ok
