"""
Load and expose app config (YAML). Used by the CLI for the default color scheme and log level.
"""
from pathlib import Path
from typing import Any

import yaml

from .schemes import DEFAULT_COLOR_SCHEME


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Read the prettylog YAML config (color_scheme, log_level) over the built-in defaults.

    Path is optional; defaults to config/default.yaml in a checkout. A missing file means defaults.
    """
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return {**_defaults(), **data}


def _defaults() -> dict[str, Any]:
    return {
        "color_scheme": DEFAULT_COLOR_SCHEME,
        "log_level": "WARNING",
    }
