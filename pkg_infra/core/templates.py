"""Template lookup and ``{{ placeholder }}`` substitution.

Templates are read-only files addressed by name. Where they live is decided
once, by the ``TemplateProvider`` handed to ``TemplateRenderer``; the bundled
``pkg_infra/templates`` directory is the default.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from pkg_infra.config import get_templates_dir
from pkg_infra.core.errors import MissingContextKey, MissingDependency, TemplateNotFound

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class TemplateProvider(Protocol):
    """Read-only access to template resources."""

    def path(self, name: str) -> Path:
        """Return the file backing template ``name``."""
        ...

    def read(self, name: str) -> str:
        """Return the text of template ``name``."""
        ...


class DirectoryTemplateProvider:
    """Templates stored as files in one directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path(self, name: str) -> Path:
        if not self.root.is_dir():
            raise MissingDependency(
                f"Template directory not found: {self.root}",
                path=self.root,
            )
        candidate = self.root / name
        # Names are logical identifiers, not paths out of the template root.
        if candidate.resolve().parent != self.root.resolve() or not candidate.is_file():
            raise TemplateNotFound(f"Template not found: {name}", path=candidate)
        return candidate

    def read(self, name: str) -> str:
        return self.path(name).read_text(encoding="utf-8")


def default_provider() -> DirectoryTemplateProvider:
    """Provider for the bundled templates, or ``PKG_INFRA_TEMPLATES`` if set."""
    return DirectoryTemplateProvider(get_templates_dir())


def detect_placeholders(text: str) -> list[str]:
    """Return placeholder names in ``text`` in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(text)


def substitute(text: str, context: Mapping[str, str], template_name: str = "") -> str:
    """Replace every ``{{ key }}`` token in ``text`` from ``context``.

    Raises:
        MissingContextKey: If a token has no entry in ``context``.
    """
    missing = [key for key in detect_placeholders(text) if key not in context]
    if missing:
        raise MissingContextKey(
            f"No value for placeholder '{missing[0]}'",
            template=template_name or None,
            missing=", ".join(sorted(set(missing))),
        )
    return PLACEHOLDER_PATTERN.sub(lambda m: context[m.group(1)], text)


class TemplateRenderer:
    """Render named templates against a substitution context."""

    def __init__(self, provider: TemplateProvider | None = None) -> None:
        self.provider: TemplateProvider = provider or default_provider()

    def render(self, template_name: str, context: Mapping[str, str]) -> str:
        """Return the text of ``template_name`` with placeholders filled in.

        Raises:
            TemplateNotFound: If no such template exists.
            MissingContextKey: If a placeholder is not in ``context``.
            MissingDependency: If the template directory is absent.
        """
        return substitute(self.provider.read(template_name), context, template_name)

    def source_path(self, template_name: str) -> Path:
        """Return the file backing ``template_name`` for verbatim copies."""
        return self.provider.path(template_name)
