"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from numcat import __version__
from numcat.cli import exit_codes
from numcat.exceptions import (
    ArgumentError,
    HelpRequested,
    NumcatError,
    OutputFlushError,
    UnrecognizedFlagError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ArgumentError, OutputFlushError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[NumcatError]
    ) -> None:
        assert issubclass(exc_class, NumcatError)

    @pytest.mark.parametrize("exc_class", [UnrecognizedFlagError, HelpRequested])
    def test_argument_errors(self, exc_class: type[NumcatError]) -> None:
        assert issubclass(exc_class, ArgumentError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(NumcatError, Exception)

    def test_hint_is_stored(self) -> None:
        err = NumcatError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert NumcatError("boom").hint is None
        assert HelpRequested("Usage: x").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
