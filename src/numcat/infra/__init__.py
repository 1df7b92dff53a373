"""Infrastructure layer — operating-system streams and files.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from numcat.infra.streams import (
    FileSourceOpener,
    open_output_sink,
    stdin_source,
    stdout_sink,
)

__all__: list[str] = [
    "FileSourceOpener",
    "open_output_sink",
    "stdin_source",
    "stdout_sink",
]
