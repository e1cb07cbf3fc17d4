"""Tests for writing files without overwriting."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkg_infra.core.errors import TargetAlreadyExists
from pkg_infra.core.materializer import copy_file, ensure_directory, materialize


class TestMaterialize:

    def test_creates_file_and_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "tests" / "testthat.R"

        materialize(target, "library(testthat)\n")

        assert target.read_text() == "library(testthat)\n"

    def test_refuses_existing_file_even_with_same_content(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("same")

        with pytest.raises(TargetAlreadyExists) as exc_info:
            materialize(target, "same")

        assert exc_info.value.context["path"] == str(target)
        assert target.read_text() == "same"

    def test_refuses_existing_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "dir"
        target.mkdir()

        with pytest.raises(TargetAlreadyExists):
            materialize(target, "x")


class TestCopyFile:

    def test_copies_bytes(self, tmp_path: Path) -> None:
        source = tmp_path / "source.bin"
        source.write_bytes(b"\x00\x01data\r\n")
        target = tmp_path / "out" / "copy.bin"

        copy_file(source, target)

        assert target.read_bytes() == b"\x00\x01data\r\n"

    def test_refuses_existing_target(self, tmp_path: Path) -> None:
        source = tmp_path / "source.txt"
        source.write_text("new")
        target = tmp_path / "target.txt"
        target.write_text("user content")

        with pytest.raises(TargetAlreadyExists):
            copy_file(source, target)

        assert target.read_text() == "user content"


class TestEnsureDirectory:

    def test_creates_nested(self, tmp_path: Path) -> None:
        assert ensure_directory(tmp_path / "a" / "b") is True
        assert (tmp_path / "a" / "b").is_dir()

    def test_existing_directory_is_not_an_error(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()

        assert ensure_directory(tmp_path / "a") is False

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        (tmp_path / "vignettes").write_text("not a directory\n")

        with pytest.raises(TargetAlreadyExists) as exc_info:
            ensure_directory(tmp_path / "vignettes")

        assert exc_info.value.context["path"] == str(tmp_path / "vignettes")
        assert (tmp_path / "vignettes").read_text() == "not a directory\n"

    def test_file_in_the_way_of_a_parent(self, tmp_path: Path) -> None:
        (tmp_path / "tests").write_text("")

        with pytest.raises(TargetAlreadyExists):
            ensure_directory(tmp_path / "tests" / "testthat")
