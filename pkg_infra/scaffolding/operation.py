"""Add one infrastructure feature to a package.

Every feature runs the same steps, driven by its ``FeatureSpec``:

1. resolve the package and load DESCRIPTION
2. refuse if any sentinel path exists (``AlreadyInitialized``)
3. create directories
4. render or copy template files (never overwriting)
5. merge DESCRIPTION fields and save once
6. add the feature's ``.Rbuildignore`` entries
7. print the follow-up message

A failure stops the run where it happens; earlier steps are not undone.
"""

from __future__ import annotations

from pathlib import Path

from pkg_infra.core.build_ignore import register_build_ignore
from pkg_infra.core.errors import AlreadyInitialized, ScaffoldError
from pkg_infra.core.field_merger import merge_field
from pkg_infra.core.manifest import save_manifest
from pkg_infra.core.materializer import copy_file, ensure_directory, materialize
from pkg_infra.core.package import PackageDescriptor, as_package
from pkg_infra.core.templates import TemplateRenderer
from pkg_infra.helpers.helpers_logging import (
    print_header,
    print_info,
    print_skipped,
    print_success,
)

from .features import load_feature_specs
from .types import FeatureSpec, FileMode, ScaffoldFeature, ScaffoldResult


def _expand(template: str, pkg: PackageDescriptor) -> str:
    return template.replace("{name}", pkg.name)


def _display(path: Path, pkg: PackageDescriptor) -> str:
    try:
        return str(path.relative_to(pkg.path))
    except ValueError:
        return str(path)


class ScaffoldOperation:
    """Adds the feature described by ``spec`` to a package."""

    def __init__(
        self,
        spec: FeatureSpec,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.spec = spec
        self.renderer = renderer or TemplateRenderer()

    @classmethod
    def for_feature(
        cls,
        feature: ScaffoldFeature | str,
        renderer: TemplateRenderer | None = None,
        specs: dict[ScaffoldFeature, FeatureSpec] | None = None,
    ) -> ScaffoldOperation:
        feature = ScaffoldFeature(feature)
        specs = specs if specs is not None else load_feature_specs()
        return cls(specs[feature], renderer)

    @property
    def feature(self) -> ScaffoldFeature:
        return self.spec.feature

    def find_existing(self, pkg: PackageDescriptor) -> Path | None:
        """Return the first sentinel path present in ``pkg``, if any."""
        for sentinel in self.spec.sentinels:
            path = pkg.path / _expand(sentinel, pkg)
            if path.exists():
                return path
        return None

    def is_present(self, pkg: PackageDescriptor) -> bool:
        return self.find_existing(pkg) is not None

    def run(self, ref: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
        """Add the feature to the package ``ref`` points at.

        Raises:
            AlreadyInitialized: If the feature is already present.
            ScaffoldError: Any other failure, with package and feature
                recorded in its context.
        """
        pkg: PackageDescriptor | None = None
        try:
            pkg = as_package(ref)
            return self._run(pkg)
        except ScaffoldError as e:
            if pkg is not None:
                e.context.setdefault("package", pkg.name)
            e.context.setdefault("feature", self.feature.value)
            raise

    def _run(self, pkg: PackageDescriptor) -> ScaffoldResult:
        existing = self.find_existing(pkg)
        if existing is not None:
            raise AlreadyInitialized(
                f"{pkg.name} already has {self.spec.title} "
                + f"({_display(existing, pkg)} exists)",
                path=existing,
            )

        print_header(f"Adding {self.spec.title} to {pkg.name}")
        result = ScaffoldResult(feature=self.feature, package=pkg.name)

        for directory in self.spec.directories:
            path = pkg.path / _expand(directory, pkg)
            if ensure_directory(path):
                result.created_directories.append(path)
                print_success(f"Created directory: {_display(path, pkg)}/")
            else:
                print_skipped(f"Directory exists: {_display(path, pkg)}/")

        context = {"name": pkg.name}
        for file_spec in self.spec.files:
            target = pkg.path / _expand(file_spec.target, pkg)
            if file_spec.mode is FileMode.COPY:
                copy_file(self.renderer.source_path(file_spec.template), target)
            else:
                materialize(target, self.renderer.render(file_spec.template, context))
            result.created_files.append(target)
            print_success(f"Created file: {_display(target, pkg)}")

        manifest = pkg.manifest
        for field_spec in self.spec.fields:
            manifest, changed = merge_field(manifest, field_spec.field, field_spec.value)
            if changed:
                result.changed_fields.append(field_spec.field)
                print_success(f"Added {field_spec.value} to {field_spec.field}")
            else:
                print_skipped(f"{field_spec.field} already lists {field_spec.value}")
        if result.changed_fields:
            save_manifest(pkg.description_path, manifest)

        for ignored in self.spec.build_ignore:
            relative = _expand(ignored, pkg)
            register_build_ignore(pkg, relative)
            result.ignored_patterns.append(relative)

        result.message = _expand(self.spec.message, pkg)
        if result.message:
            print_info(result.message)
        return result


def run_feature(
    feature: ScaffoldFeature | str,
    pkg: str | Path | PackageDescriptor = ".",
) -> ScaffoldResult:
    """Add ``feature`` to ``pkg`` with the default templates."""
    return ScaffoldOperation.for_feature(feature).run(pkg)


def use_testthat(pkg: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
    """Create ``tests/testthat.R`` and ``tests/testthat/``; suggest testthat."""
    return run_feature(ScaffoldFeature.TEST_HARNESS, pkg)


def use_rstudio(pkg: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
    """Add ``<package>.Rproj``."""
    return run_feature(ScaffoldFeature.IDE_PROJECT, pkg)


def use_knitr(pkg: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
    """Create ``vignettes/`` and declare knitr as the vignette builder."""
    return run_feature(ScaffoldFeature.DOC_GENERATION, pkg)


def use_rcpp(pkg: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
    """Create ``src/`` and depend on Rcpp."""
    return run_feature(ScaffoldFeature.NATIVE_EXTENSION, pkg)


def use_travis(pkg: str | Path | PackageDescriptor = ".") -> ScaffoldResult:
    """Add ``.travis.yml`` and keep it out of the built package."""
    return run_feature(ScaffoldFeature.CONTINUOUS_INTEGRATION, pkg)


add_test_infrastructure = use_testthat
add_rstudio_project = use_rstudio
add_travis = use_travis
