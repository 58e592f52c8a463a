"""Config loading and normalization for Skillpack runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillpack.config.model import SkillpackConfig
from skillpack.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG_EXCLUDE_DIRS,
    DEFAULT_CONFIG_MAX_DEPTH,
    DEFAULT_CONFIG_MAX_FILE_MB,
    DEFAULT_GLOBAL_DIR,
    DEFAULT_PROJECT_DIR,
)
from skillpack.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SkillpackConfig:
    """Load and validate config from ``skillpack.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillpackConfig(project_root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return SkillpackConfig(
        project_root=root,
        project_dir=_ensure_string(raw.get("project_dir", DEFAULT_PROJECT_DIR), "project_dir"),
        global_dir=_ensure_string(raw.get("global_dir", DEFAULT_GLOBAL_DIR), "global_dir"),
        max_depth=_ensure_positive_int(raw.get("max_depth", DEFAULT_CONFIG_MAX_DEPTH), "max_depth"),
        max_file_mb=_ensure_positive_int(raw.get("max_file_mb", DEFAULT_CONFIG_MAX_FILE_MB), "max_file_mb"),
        exclude_dirs=tuple(
            name.strip()
            for name in _ensure_string_list(
                raw.get("exclude_dirs", list(DEFAULT_CONFIG_EXCLUDE_DIRS)),
                "exclude_dirs",
            )
            if name.strip()
        ),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
