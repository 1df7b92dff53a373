"""CLI application entry point for numcat.

This module is the **sole error boundary** for the entire application.
It catches :class:`~numcat.exceptions.NumcatError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, renders them on stderr and returns
well-defined exit codes.

Architecture notes
------------------
* No copying logic lives here; it is delegated to
  :class:`~numcat.core.copy_service.CopyService`.
* Per-file errors are reported as they happen and do not stop the run;
  they only turn the final exit code into ``GENERAL_ERROR``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from numcat.cli import exit_codes
from numcat.cli.args import DEFAULT_PROG, parse_args
from numcat.cli.console import console
from numcat.core.copy_service import CopyService
from numcat.core.models import CopyError
from numcat.exceptions import NumcatError, OutputFlushError
from numcat.infra.streams import FileSourceOpener, open_output_sink


def _program_name() -> str:
    """Name shown in the usage line: the basename of ``argv[0]``."""
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name == "__main__.py":
        return DEFAULT_PROG
    return name


def _report_copy_error(error: CopyError) -> None:
    console.plain(str(error))


def _silence_stdout() -> None:
    """Point the stdout descriptor at the null device.

    Once output can no longer be delivered (typically a closed pipe),
    the interpreter's own flush at exit would fail again and print a
    second traceback-style message.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Run numcat.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    prog:
        Program name for the usage line.  Defaults to the basename of
        ``sys.argv[0]``.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ArgumentError
        For ``-h`` or an unrecognized flag, before any file is read.
    OutputFlushError
        When buffered output cannot be delivered.
    """
    tokens = sys.argv[1:] if argv is None else argv
    config = parse_args(tokens, prog or _program_name())

    service = CopyService(
        open_output_sink(config.numbered),
        FileSourceOpener(),
    )
    ok = service.run(config.files, on_error=_report_copy_error)
    return exit_codes.SUCCESS if ok else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OutputFlushError as exc:
        _silence_stdout()
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except NumcatError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.plain("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
