"""numcat — concatenate files to standard output, optionally numbered.

Reads each named file (``-`` meaning standard input) in order and writes
its bytes to standard output.
"""

from numcat.version import __version__

__all__: list[str] = ["__version__"]
