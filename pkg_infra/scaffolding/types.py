"""Data types describing infrastructure features."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ScaffoldFeature(str, Enum):
    """Infrastructure that can be added to a package."""

    TEST_HARNESS = "testthat"
    IDE_PROJECT = "rstudio"
    DOC_GENERATION = "knitr"
    NATIVE_EXTENSION = "rcpp"
    CONTINUOUS_INTEGRATION = "travis"


class FileMode(str, Enum):
    """How a template becomes a file in the package."""

    RENDER = "render"  # substitute {{ placeholders }}
    COPY = "copy"  # byte-for-byte copy


@dataclass(frozen=True)
class FileSpec:
    template: str
    target: str
    mode: FileMode = FileMode.RENDER


@dataclass(frozen=True)
class FieldSpec:
    field: str
    value: str


@dataclass(frozen=True)
class FeatureSpec:
    """Everything one feature creates or changes.

    Relative paths may contain ``{name}``, replaced by the package name.
    """

    feature: ScaffoldFeature
    title: str
    sentinels: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()
    files: tuple[FileSpec, ...] = ()
    fields: tuple[FieldSpec, ...] = ()
    build_ignore: tuple[str, ...] = ()
    message: str = ""


@dataclass
class ScaffoldResult:
    """Outcome of a successful scaffold operation."""

    feature: ScaffoldFeature
    package: str
    created_directories: list[Path] = field(default_factory=list)
    created_files: list[Path] = field(default_factory=list)
    changed_fields: list[str] = field(default_factory=list)
    ignored_patterns: list[str] = field(default_factory=list)
    message: str = ""
