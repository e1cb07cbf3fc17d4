"""Add entries to DESCRIPTION list fields without duplicating them."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pkg_infra.config import FIELD_JOIN_SEPARATOR
from pkg_infra.core.manifest import Manifest, load_manifest, save_manifest
from pkg_infra.helpers.helpers_logging import print_skipped, print_success

if TYPE_CHECKING:
    from pkg_infra.core.package import PackageDescriptor


class MergeResult(NamedTuple):
    manifest: Manifest
    changed: bool


def contains_entry(existing: str, value: str) -> bool:
    """Return True if ``value`` already appears in a field value.

    This is a plain substring test, so ``"knitr2"`` counts as containing
    ``"knitr"``. Callers go through this function so a structured
    comparison can replace it in one place.
    """
    return value in existing


def merge_field(manifest: Manifest, field: str, value: str) -> MergeResult:
    """Return a copy of ``manifest`` with ``value`` added to ``field``.

    - Missing field: set to ``value``.
    - Field without ``value``: append it on a new indented line.
    - Field already containing ``value``: returned unchanged.

    The input manifest is never modified.
    """
    old = manifest.get(field)
    if old is None:
        new = value
    elif not contains_entry(old, value):
        new = f"{old}{FIELD_JOIN_SEPARATOR}{value}"
    else:
        return MergeResult(manifest, False)

    updated = manifest.copy()
    updated[field] = new
    return MergeResult(updated, True)


def add_desc_package(pkg: PackageDescriptor, field: str, name: str) -> bool:
    """Add ``name`` to ``field`` of the package's DESCRIPTION on disk.

    DESCRIPTION is re-read first and only rewritten when something changed.

    Returns:
        True if the file was modified.
    """
    path = pkg.description_path
    result = merge_field(load_manifest(path), field, name)
    if result.changed:
        save_manifest(path, result.manifest)
        print_success(f"Added {name} to {field}")
    else:
        print_skipped(f"{field} already lists {name}")
    return result.changed
