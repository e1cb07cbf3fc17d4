"""YAML loading for the bundled feature table.

Uses ruamel.yaml, whose ``load()`` is safe by default (it never constructs
arbitrary Python objects from YAML tags).
"""

from pathlib import Path
from typing import Union, cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


yaml = YAML(typ="safe", pure=True)


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ruamel.yaml.error.YAMLError: If the file is not valid YAML.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding="utf-8") as f:
        return cast(ConfigValue, yaml.load(f))


__all__ = ["ConfigDict", "ConfigValue", "YAMLError", "load_yaml_file", "yaml"]
