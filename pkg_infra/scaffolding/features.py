"""Load the feature table from ``features.yaml``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

from pkg_infra.config import FEATURES_FILE, get_templates_dir
from pkg_infra.core.errors import FeatureConfigError, MissingDependency
from pkg_infra.helpers.yaml_loader import YAMLError, load_yaml_file

from .types import FeatureSpec, FieldSpec, FileMode, FileSpec, ScaffoldFeature

_LIST_KEYS = ("sentinels", "directories", "files", "fields", "build_ignore")


def _str_list(raw: object, feature: str, key: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise FeatureConfigError(
            f"'{key}' must be a list of strings",
            feature=feature,
        )
    return tuple(cast(list[str], raw))


def _parse_files(raw: list[Any], feature: str) -> tuple[FileSpec, ...]:
    files: list[FileSpec] = []
    for entry in raw:
        if not isinstance(entry, dict) or "template" not in entry or "target" not in entry:
            raise FeatureConfigError(
                "Each file entry needs 'template' and 'target'",
                feature=feature,
            )
        try:
            mode = FileMode(entry.get("mode", FileMode.RENDER.value))
        except ValueError as e:
            raise FeatureConfigError(
                f"Unknown file mode: {entry.get('mode')}",
                feature=feature,
            ) from e
        files.append(FileSpec(str(entry["template"]), str(entry["target"]), mode))
    return tuple(files)


def _parse_fields(raw: list[Any], feature: str) -> tuple[FieldSpec, ...]:
    fields: list[FieldSpec] = []
    for entry in raw:
        if not isinstance(entry, dict) or "field" not in entry or "value" not in entry:
            raise FeatureConfigError(
                "Each field entry needs 'field' and 'value'",
                feature=feature,
            )
        fields.append(FieldSpec(str(entry["field"]), str(entry["value"])))
    return tuple(fields)


def parse_feature_spec(feature: ScaffoldFeature, raw: object) -> FeatureSpec:
    """Validate one entry of the feature table."""
    name = feature.value
    if not isinstance(raw, dict):
        raise FeatureConfigError("Feature entry must be a mapping", feature=name)
    entry = cast(dict[str, Any], raw)

    for key in _LIST_KEYS:
        if not isinstance(entry.get(key, []), list):
            raise FeatureConfigError(f"'{key}' must be a list", feature=name)

    return FeatureSpec(
        feature=feature,
        title=str(entry.get("title", name)),
        sentinels=_str_list(entry.get("sentinels", []), name, "sentinels"),
        directories=_str_list(entry.get("directories", []), name, "directories"),
        files=_parse_files(entry.get("files", []), name),
        fields=_parse_fields(entry.get("fields", []), name),
        build_ignore=_str_list(entry.get("build_ignore", []), name, "build_ignore"),
        message=str(entry.get("message") or ""),
    )


def load_feature_specs(path: Path | None = None) -> dict[ScaffoldFeature, FeatureSpec]:
    """Load and validate every feature from ``features.yaml``.

    Args:
        path: Feature table to read. Defaults to the one in the template
            directory.

    Raises:
        MissingDependency: If the feature table does not exist.
        FeatureConfigError: If it is not valid YAML, or a feature is missing
            or malformed.
    """
    path = path or get_templates_dir() / FEATURES_FILE
    try:
        data = load_yaml_file(path)
    except FileNotFoundError as e:
        raise MissingDependency(f"Feature table not found: {path}", path=path) from e
    except YAMLError as e:
        raise FeatureConfigError(f"Invalid YAML in feature table: {e}", path=path) from e

    if not isinstance(data, dict):
        raise FeatureConfigError("Feature table must be a mapping", path=path)

    specs: dict[ScaffoldFeature, FeatureSpec] = {}
    for feature in ScaffoldFeature:
        if feature.value not in data:
            raise FeatureConfigError(
                f"Feature table has no entry for '{feature.value}'",
                path=path,
            )
        specs[feature] = parse_feature_spec(feature, data[feature.value])
    return specs
