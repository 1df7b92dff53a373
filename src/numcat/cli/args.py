"""Command-line interpretation for numcat.

The grammar is deliberately tiny and does not follow ``getopt``
conventions: a token is a flag when it is at least two characters long
and starts with ``-``; everything else (including a lone ``-``) is a
file name.  Flags are checked first, left to right, and the remaining
tokens keep their relative order as the file list.  There is no option
clustering, no long options and no ``--`` terminator.
"""

from __future__ import annotations

from collections.abc import Sequence

from numcat.core.models import STDIN_NAME, CatConfig
from numcat.exceptions import HelpRequested, UnrecognizedFlagError

DEFAULT_PROG: str = "numcat"

NUMBER_FLAG: str = "-n"
HELP_FLAG: str = "-h"


def is_flag(token: str) -> bool:
    """Return ``True`` for a flag-like token such as ``-n`` or ``--x``."""
    return len(token) >= 2 and token.startswith("-")


def usage(prog: str = DEFAULT_PROG) -> str:
    """Return the one-line usage text for *prog*."""
    return f"Usage: {prog} [-n] [file1 [file2 ...]]"


def parse_args(tokens: Sequence[str], prog: str = DEFAULT_PROG) -> CatConfig:
    """Interpret *tokens* (program name excluded) as a :class:`CatConfig`.

    Raises
    ------
    HelpRequested
        When ``-h`` is seen before any unrecognized flag.
    UnrecognizedFlagError
        For the first flag-like token that is neither ``-n`` nor ``-h``.
    """
    flags = [token for token in tokens if is_flag(token)]
    files = tuple(token for token in tokens if not is_flag(token))

    numbered = False
    for flag in flags:
        if flag == NUMBER_FLAG:
            numbered = True
        elif flag == HELP_FLAG:
            raise HelpRequested(usage(prog))
        else:
            raise UnrecognizedFlagError(
                flag,
                hint=f"Run '{prog} {HELP_FLAG}' for usage.",
            )

    return CatConfig(files=files or (STDIN_NAME,), numbered=numbered)
