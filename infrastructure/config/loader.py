"""Configuration loading from YAML files."""

import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import TreeConfig
from infrastructure.constants import ENV_ENCODING, ENV_TREE_FILE


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    tree_file = os.environ.get(ENV_TREE_FILE)
    if tree_file:
        overrides["tree_file"] = Path(tree_file)
    encoding = os.environ.get(ENV_ENCODING)
    if encoding:
        overrides["encoding"] = encoding
    return overrides


def load_tree_config(config_path: Path | None = None) -> TreeConfig:
    """
    Load meshtree.yaml (if given) and apply environment overrides.

    Precedence: environment > YAML > model defaults. Relative `tree_file` and
    `log_file` entries in the YAML resolve against the YAML file's directory.

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the YAML document is not a mapping
        pydantic.ValidationError: If a field has an invalid value
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        data = _load_yaml(config_path)
        for key in ("tree_file", "log_file"):
            if data.get(key):
                p = Path(str(data[key]))
                data[key] = p if p.is_absolute() else config_path.parent / p

    data.update(_env_overrides())
    return TreeConfig(**data)
