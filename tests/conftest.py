"""Shared pytest fixtures for building skill bundle trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

BundleFactory: TypeAlias = Callable[..., Path]


def write_bundle(
    folder: Path,
    *,
    name: str | None = "sample-skill",
    description: str | None = "Does a sample thing.",
    extra_frontmatter: str = "",
    body: str = "# Sample\nUse this skill for samples.\n",
    files: dict[str, str] | None = None,
) -> Path:
    """Create a bundle directory with a SKILL.md and optional auxiliary files."""
    folder.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    frontmatter = "\n".join(lines) + ("\n" if lines else "") + extra_frontmatter
    (folder / "SKILL.md").write_text(f"---\n{frontmatter}---\n{body}", encoding="utf-8")
    for relative, content in (files or {}).items():
        path = folder / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return folder


@pytest.fixture()
def make_bundle() -> BundleFactory:
    """Return the bundle factory for use inside tests."""
    return write_bundle


@pytest.fixture()
def source_root(tmp_path: Path) -> Path:
    """Return an empty source directory."""
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
