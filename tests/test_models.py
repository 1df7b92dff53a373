"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses
import errno

import pytest

from numcat.core.models import STDIN_NAME, CatConfig, CopyError


class TestCatConfig:
    def test_frozen(self) -> None:
        config = CatConfig(files=("a",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.numbered = True  # type: ignore[misc]

    def test_numbered_defaults_to_false(self) -> None:
        assert CatConfig(files=(STDIN_NAME,)).numbered is False

    def test_empty_file_list_rejected(self) -> None:
        with pytest.raises(ValueError):
            CatConfig(files=())


class TestCopyError:
    def test_str_is_filename_qualified(self) -> None:
        assert str(CopyError("x.txt", "Permission denied")) == "x.txt: Permission denied"

    def test_from_os_error_uses_strerror(self) -> None:
        exc = OSError(errno.EACCES, "Permission denied", "x.txt")
        assert CopyError.from_os_error("x.txt", exc).message == "Permission denied"

    def test_from_os_error_without_strerror(self) -> None:
        err = CopyError.from_os_error("x.txt", OSError("device went away"))
        assert err.message == "device went away"

    def test_equality(self) -> None:
        assert CopyError("a", "b") == CopyError("a", "b")
