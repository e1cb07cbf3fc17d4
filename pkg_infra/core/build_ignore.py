"""Maintain ``.Rbuildignore``, the patterns ``R CMD build`` leaves out.

Each line is a Perl regular expression matched against paths relative to
the package root, so literal file names are escaped and anchored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pkg_infra.config import BUILD_IGNORE_FILE
from pkg_infra.helpers.helpers_logging import print_skipped, print_success

if TYPE_CHECKING:
    from pkg_infra.core.package import PackageDescriptor


def escape_build_ignore(path: str) -> str:
    """Turn a literal relative path into an anchored pattern.

    >>> escape_build_ignore(".travis.yml")
    '^\\\\.travis\\\\.yml$'
    """
    return "^" + re.sub(r"\.", r"\\.", path) + "$"


def read_build_ignore(pkg: PackageDescriptor) -> list[str]:
    """Return the patterns currently in ``.Rbuildignore`` (empty if absent)."""
    path = pkg.path / BUILD_IGNORE_FILE
    if not path.exists():
        return []
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line]


def register_build_ignore(
    pkg: PackageDescriptor,
    pattern: str,
    escape: bool = True,
) -> bool:
    """Append ``pattern`` to the package's ``.Rbuildignore``.

    Call this only after the files being scaffolded have been created. A
    pattern already present as an exact line is not written again.

    Returns:
        True if the pattern was appended.
    """
    if escape:
        pattern = escape_build_ignore(pattern)

    path = pkg.path / BUILD_IGNORE_FILE
    if pattern in read_build_ignore(pkg):
        print_skipped(f"{BUILD_IGNORE_FILE} already has {pattern}")
        return False

    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    needs_newline = bool(existing) and not existing.endswith("\n")
    with path.open("a", encoding="utf-8") as f:
        if needs_newline:
            f.write("\n")
        f.write(f"{pattern}\n")
    print_success(f"Added {pattern} to {BUILD_IGNORE_FILE}")
    return True
