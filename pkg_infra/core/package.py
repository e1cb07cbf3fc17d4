"""Resolve a package reference to its root directory and DESCRIPTION."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pkg_infra.config import DESCRIPTION_FILE
from pkg_infra.core.errors import ManifestUnreadable
from pkg_infra.core.manifest import Manifest, load_manifest


@dataclass(frozen=True)
class PackageDescriptor:
    """A package source tree as seen at the start of one operation."""

    path: Path
    name: str
    manifest: Manifest

    @property
    def description_path(self) -> Path:
        return self.path / DESCRIPTION_FILE


def find_package_root(start: Path) -> Path | None:
    """Search upwards from ``start`` for a directory containing DESCRIPTION.

    Lets commands run from any subdirectory of a package (``R/``,
    ``tests/``...).
    """
    start = start.resolve()
    for parent in [start, *start.parents]:
        if (parent / DESCRIPTION_FILE).is_file():
            return parent
    return None


def as_package(ref: str | Path | PackageDescriptor = ".") -> PackageDescriptor:
    """Build a PackageDescriptor from a path, a DESCRIPTION path or a descriptor.

    A descriptor is reloaded from disk so every operation starts from the
    current manifest.

    Raises:
        ManifestUnreadable: If no DESCRIPTION can be found, it is malformed,
            or it has no ``Package`` field.
    """
    if isinstance(ref, PackageDescriptor):
        ref = ref.path

    path = Path(ref).expanduser()
    if path.name == DESCRIPTION_FILE and path.is_file():
        root: Path | None = path.resolve().parent
    elif path.is_dir():
        root = find_package_root(path)
    else:
        raise ManifestUnreadable(
            f"Can't find package: {path} does not exist",
            path=path,
        )

    if root is None:
        raise ManifestUnreadable(
            f"Can't find DESCRIPTION in {path} or any parent directory",
            path=path,
        )

    manifest = load_manifest(root / DESCRIPTION_FILE)
    name = manifest.get("Package", "").strip()
    if not name:
        raise ManifestUnreadable(
            "DESCRIPTION has no Package field",
            path=root / DESCRIPTION_FILE,
        )

    return PackageDescriptor(path=root, name=name, manifest=manifest)
