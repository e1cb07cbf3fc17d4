"""Building blocks for scaffolding: DESCRIPTION I/O, merging, templates, files."""

from .errors import (
    AlreadyInitialized,
    FeatureConfigError,
    ManifestUnreadable,
    MissingContextKey,
    MissingDependency,
    ScaffoldError,
    TargetAlreadyExists,
    TemplateNotFound,
)
from .field_merger import MergeResult, add_desc_package, merge_field
from .manifest import Manifest, load_manifest, save_manifest
from .package import PackageDescriptor, as_package

__all__ = [
    "AlreadyInitialized",
    "FeatureConfigError",
    "ManifestUnreadable",
    "MissingContextKey",
    "MissingDependency",
    "ScaffoldError",
    "TargetAlreadyExists",
    "TemplateNotFound",
    "MergeResult",
    "add_desc_package",
    "merge_field",
    "Manifest",
    "load_manifest",
    "save_manifest",
    "PackageDescriptor",
    "as_package",
]
