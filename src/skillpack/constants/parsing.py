"""Constants for frontmatter parsing and validation."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

SKILL_NAME_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
SKILL_NAME_MAX_LENGTH: int = 64

REQUIRED_FRONTMATTER_FIELDS: tuple[str, ...] = ("name", "description")
