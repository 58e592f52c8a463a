"""Parsing-related exceptions."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class SkillParseError(SkillpackError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""
