"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillpack.constants.parsing import FRONTMATTER_ALT_DELIMITER, FRONTMATTER_DELIMITER
from skillpack.exceptions import SkillParseError
from skillpack.model import ParsedSkillDocument


def parse_skill_markdown_file(path: Path) -> ParsedSkillDocument:
    """Parse a SKILL.md file into frontmatter and body.

    Raises ``OSError`` when the file cannot be read and ``SkillParseError``
    when it is not UTF-8 or the frontmatter block is malformed.
    """
    try:
        raw_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{path} is not valid UTF-8 text: {exc}") from exc
    return parse_skill_markdown_text(raw_text, path)


def parse_skill_markdown_text(raw_text: str, path: Path) -> ParsedSkillDocument:
    """Parse SKILL.md content already loaded into memory."""
    normalized = raw_text.lstrip("\ufeff")
    lines = normalized.splitlines()

    frontmatter: dict[str, Any] | None = None
    body_lines = lines

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise SkillParseError(f"Unterminated frontmatter block in {path}")

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

        if payload is None:
            frontmatter = {}
        elif isinstance(payload, dict):
            frontmatter = payload
        else:
            raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping, got {type(payload).__name__}")

        body_lines = lines[frontmatter_end + 1 :]

    return ParsedSkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body="\n".join(body_lines).strip(),
    )


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None
