"""Core / service layer — copying and line numbering.

Rules
-----
* No ``print()`` calls.
* No ``sys`` stream or filesystem access; sources and sinks are injected.
* No imports from ``cli`` or ``infra``.
"""

from numcat.core.copy_service import CopyService, copy_stream
from numcat.core.models import STDIN_NAME, CatConfig, CopyError
from numcat.core.numbering import NumberedSink
from numcat.core.protocols import ByteSource, OutputSink, SourceOpener

__all__: list[str] = [
    "STDIN_NAME",
    "ByteSource",
    "CatConfig",
    "CopyError",
    "CopyService",
    "NumberedSink",
    "OutputSink",
    "SourceOpener",
    "copy_stream",
]
