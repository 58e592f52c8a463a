"""Constants for filesystem discovery of skill bundles."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
DEFAULT_MAX_DEPTH: int = 4
DEFAULT_MAX_FILE_MB: int = 2
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("node_modules", "__pycache__")
ALWAYS_EXCLUDED_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn"})
