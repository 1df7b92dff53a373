"""Domain models for numcat.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and rendering.  They carry zero I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

STDIN_NAME: str = "-"
"""File name that selects standard input instead of a path."""


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CatConfig:
    """What to copy and how, as interpreted from the command line."""

    files: tuple[str, ...]
    """File names in argument order.  Never empty."""

    numbered: bool = False
    """Prefix every output line with its 1-based number."""

    def __post_init__(self) -> None:
        if not self.files:
            raise ValueError("CatConfig.files must not be empty")


# ---------------------------------------------------------------------------
# Per-file failure
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CopyError:
    """A failure to open or copy a single file.

    Produced where the failure is detected and handed straight to the
    reporting callback; nothing keeps it afterwards.
    """

    filename: str
    """The name exactly as given on the command line."""

    message: str
    """Human-readable description of the underlying failure."""

    @classmethod
    def from_os_error(cls, filename: str, exc: OSError) -> CopyError:
        """Build an error from *exc*, preferring the bare OS description."""
        return cls(filename=filename, message=exc.strerror or str(exc))

    def __str__(self) -> str:
        return f"{self.filename}: {self.message}"
