"""Line-numbering output filter.

:class:`NumberedSink` wraps another :class:`~numcat.core.protocols.OutputSink`
and inserts a right-aligned, six-character line number plus one space in
front of the first byte of every line::

    b"a\\nb"  ->  b"     1 a\\n     2 b"

A number is written only once a byte of its line is about to follow, so
input ending in a newline gets no trailing number.  The counter lives on
the sink, so numbering runs on across every file copied through it.
"""

from __future__ import annotations

from numcat.core.protocols import OutputSink

NUMBER_FORMAT: bytes = b"%6d "
"""Prefix written before each line."""


class NumberedSink:
    """Output sink decorator that numbers lines.

    Parameters
    ----------
    output:
        Inner sink, normally the buffered standard-output stream.  The
        numbered sink takes exclusive ownership of it.
    """

    def __init__(self, output: OutputSink) -> None:
        self._output: OutputSink = output
        self.line_number: int = 0
        self.beginning_line: bool = True

    def _write_number(self) -> None:
        self.line_number += 1
        self.beginning_line = True
        self._output.write(NUMBER_FORMAT % self.line_number)

    def write(self, data: bytes, /) -> int:
        """Write *data* with a number in front of every line it starts.

        Runs of bytes up to and including each newline go to the inner
        sink in one call and the inner sink is flushed after every
        newline, so a reader of a pipe or terminal sees each numbered
        line as soon as it is complete.
        """
        data = bytes(data)
        start = 0
        while start < len(data):
            if self.beginning_line:
                self._write_number()
            newline = data.find(b"\n", start)
            if newline == -1:
                self.beginning_line = False
                self._output.write(data[start:])
                break
            self.beginning_line = True
            self._output.write(data[start:newline + 1])
            self._output.flush()
            start = newline + 1
        return len(data)

    def flush(self) -> None:
        self._output.flush()
