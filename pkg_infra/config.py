"""Paths and file names shared across pkg-infra."""

import os
from pathlib import Path

DESCRIPTION_FILE = "DESCRIPTION"
BUILD_IGNORE_FILE = ".Rbuildignore"
FEATURES_FILE = "features.yaml"

# Set to a directory to use templates other than the bundled ones.
TEMPLATES_ENV_VAR = "PKG_INFRA_TEMPLATES"

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Continuation used when appending to a multi-line DESCRIPTION list field.
FIELD_JOIN_SEPARATOR = ",\n    "


def get_templates_dir() -> Path:
    """Return the template directory, honouring ``PKG_INFRA_TEMPLATES``."""
    override = os.environ.get(TEMPLATES_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_TEMPLATES_DIR
