"""Configuration defaults and filenames."""

from __future__ import annotations

from skillpack.constants.discovery import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_DEPTH, DEFAULT_MAX_FILE_MB

CONFIG_FILENAME: str = "skillpack.yaml"
DEFAULT_PROJECT_DIR: str = ".agents/skills"
DEFAULT_GLOBAL_DIR: str = "~/.agents/skills"

DEFAULT_CONFIG_MAX_DEPTH: int = DEFAULT_MAX_DEPTH
DEFAULT_CONFIG_MAX_FILE_MB: int = DEFAULT_MAX_FILE_MB
DEFAULT_CONFIG_EXCLUDE_DIRS: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
