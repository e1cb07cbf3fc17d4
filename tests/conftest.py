"""Shared fixtures for pkg-infra tests.

Provides a ``make_package`` factory that writes a minimal R source package
(DESCRIPTION plus optional extra files) under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests._package_defaults import DEFAULT_DESCRIPTION

MakePackage = Callable[..., Path]


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip ANSI colors so output assertions read naturally."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("PKG_INFRA_TEMPLATES", raising=False)


@pytest.fixture()
def make_package(tmp_path: Path) -> MakePackage:
    """Return a factory creating a package directory.

    Usage::

        root = make_package(description="Package: foo\\n", files={"R/foo.R": ""})
    """

    def _make(
        name: str = "mypkg",
        *,
        description: str | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        if description is None:
            description = DEFAULT_DESCRIPTION.replace("mypkg", name)
        (root / "DESCRIPTION").write_text(description, encoding="utf-8")
        for relative, content in (files or {}).items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def package_dir(make_package: MakePackage) -> Path:
    """Default package: ``mypkg`` with the standard DESCRIPTION."""
    return make_package()
