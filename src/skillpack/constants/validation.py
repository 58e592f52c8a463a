"""Stable validation error codes and allowed-key sets for config and bundle validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # project root directory not found

SKILL001: str = "SKILL001"  # SKILL.md missing or unreadable
SKILL002: str = "SKILL002"  # frontmatter cannot be parsed
SKILL003: str = "SKILL003"  # required field missing
SKILL004: str = "SKILL004"  # field has the wrong type
SKILL005: str = "SKILL005"  # name does not match the allowed pattern
SKILL006: str = "SKILL006"  # name too long
SKILL007: str = "SKILL007"  # description is empty

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "project_dir",
        "global_dir",
        "max_depth",
        "max_file_mb",
        "exclude_dirs",
    }
)

STRING_KEYS: tuple[str, ...] = ("project_dir", "global_dir")
POSITIVE_INT_KEYS: tuple[str, ...] = ("max_depth", "max_file_mb")
LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("exclude_dirs",)
