"""Tests for resolving a package reference."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkg_infra.core.errors import ManifestUnreadable
from pkg_infra.core.package import as_package, find_package_root


class TestAsPackage:

    def test_from_root_directory(self, package_dir: Path) -> None:
        pkg = as_package(package_dir)

        assert pkg.path == package_dir.resolve()
        assert pkg.name == "mypkg"
        assert pkg.manifest["Version"] == "0.1.0"

    def test_from_subdirectory(self, make_package) -> None:
        root = make_package(files={"R/hello.R": "hello <- function() 1\n"})

        assert as_package(root / "R").path == root.resolve()

    def test_from_description_path(self, package_dir: Path) -> None:
        assert as_package(package_dir / "DESCRIPTION").name == "mypkg"

    def test_from_descriptor_reloads_manifest(self, package_dir: Path) -> None:
        pkg = as_package(package_dir)
        (package_dir / "DESCRIPTION").write_text("Package: renamed\n")

        assert as_package(pkg).name == "renamed"

    def test_default_is_current_directory(
        self, package_dir: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(package_dir)

        assert as_package().name == "mypkg"

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestUnreadable):
            as_package(tmp_path / "does-not-exist")

    def test_directory_without_description(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()

        assert find_package_root(empty) is None
        with pytest.raises(ManifestUnreadable):
            as_package(empty)

    def test_missing_package_field(self, make_package) -> None:
        root = make_package(description="Title: No name\n")

        with pytest.raises(ManifestUnreadable) as exc_info:
            as_package(root)

        assert "Package field" in exc_info.value.message

    def test_malformed_description(self, make_package) -> None:
        root = make_package(description="this is not dcf\n")

        with pytest.raises(ManifestUnreadable):
            as_package(root)
