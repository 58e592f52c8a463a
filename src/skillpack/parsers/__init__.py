"""Parsers for skill bundle documents."""

from .skill_markdown import parse_skill_markdown_file, parse_skill_markdown_text

__all__ = ["parse_skill_markdown_file", "parse_skill_markdown_text"]
