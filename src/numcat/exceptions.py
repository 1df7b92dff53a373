"""Custom exception hierarchy for numcat.

Every condition that aborts the whole invocation inherits from
:class:`NumcatError` so that the CLI error boundary can render a clean
message without a stack trace.  Per-file copy failures are *not*
exceptions: they are returned as :class:`~numcat.core.models.CopyError`
values and the run continues with the next file.

Hierarchy
---------
NumcatError
├── ArgumentError
│   ├── UnrecognizedFlagError
│   └── HelpRequested
└── OutputFlushError
"""

from __future__ import annotations


class NumcatError(Exception):
    """Base exception for all numcat errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ------------------------------------------------------------

class ArgumentError(NumcatError):
    """Raised when the command line cannot be turned into a configuration.

    No file is read once this has been raised.
    """


class UnrecognizedFlagError(ArgumentError):
    """Raised for a flag-like token other than ``-n`` or ``-h``."""

    def __init__(self, flag: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unrecognized flag {flag}", hint=hint)
        self.flag: str = flag


class HelpRequested(ArgumentError):
    """Raised for ``-h``; the message is the usage line.

    Help is reported through the error path and ends the process with a
    non-zero status, just like a bad flag.
    """

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage: str = usage


# --- Output ------------------------------------------------------------------

class OutputFlushError(NumcatError):
    """Raised when buffered output can no longer be delivered."""
