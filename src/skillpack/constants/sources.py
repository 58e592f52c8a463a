"""Constants for resolving bundle source references."""

from __future__ import annotations

import re
from re import Pattern

GIT_URL_PREFIXES: tuple[str, ...] = ("https://", "http://", "ssh://", "git@", "file://")
GIT_URL_SUFFIX: str = ".git"
GITHUB_BASE_URL: str = "https://github.com"
GITHUB_SHORTHAND_PATTERN: Pattern[str] = re.compile(
    r"^(?P<owner>[A-Za-z0-9](?:[A-Za-z0-9._-]*))/(?P<repo>[A-Za-z0-9._-]+)(?:/(?P<subpath>[^\s]+))?$"
)
CLONE_TEMP_PREFIX: str = "skillpack-src-"
GIT_EXECUTABLE: str = "git"
