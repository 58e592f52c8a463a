"""Filesystem discovery of skill bundle directories."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from skillpack.constants.discovery import (
    ALWAYS_EXCLUDED_DIRS,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_FILE_MB,
    SKILL_MARKDOWN_FILENAME,
)
from skillpack.exceptions import BundleIOError
from skillpack.model import BundleCandidate

logger = logging.getLogger(__name__)


def iter_bundle_candidates(
    root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_file_mb: int = DEFAULT_MAX_FILE_MB,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> Iterator[BundleCandidate]:
    """Yield bundle candidates below *root* in sorted path order.

    A candidate is a directory with a SKILL.md directly inside it; the walk
    does not descend into a candidate once found. Each call walks the tree
    again, so iterating twice over an unchanged tree yields equal sequences.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        raise BundleIOError(f"source directory does not exist: {resolved_root}")

    excluded = ALWAYS_EXCLUDED_DIRS | frozenset(exclude_dirs)
    size_limit_bytes = max_file_mb * 1024 * 1024
    yield from _walk(resolved_root, 0, max_depth, excluded, size_limit_bytes)


def discover_bundles(
    root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_file_mb: int = DEFAULT_MAX_FILE_MB,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[BundleCandidate]:
    """Materialize ``iter_bundle_candidates`` into a list."""
    return list(
        iter_bundle_candidates(root, max_depth=max_depth, max_file_mb=max_file_mb, exclude_dirs=exclude_dirs)
    )


def _walk(
    directory: Path,
    depth: int,
    max_depth: int,
    excluded: frozenset[str],
    size_limit_bytes: int,
) -> Iterator[BundleCandidate]:
    instructions = directory / SKILL_MARKDOWN_FILENAME
    if instructions.is_file():
        if _within_size_limit(instructions, size_limit_bytes):
            yield BundleCandidate(path=directory, instructions=instructions)
        return

    logger.debug("No %s in %s", SKILL_MARKDOWN_FILENAME, directory)

    if depth >= max_depth:
        return

    try:
        with os.scandir(directory) as entries:
            children = sorted(
                (
                    Path(entry.path)
                    for entry in entries
                    if entry.is_dir(follow_symlinks=False) and not _is_excluded(entry.name, excluded)
                ),
                key=lambda path: path.name,
            )
    except OSError as exc:
        raise BundleIOError(f"cannot list directory {directory}: {exc}") from exc

    for child in children:
        yield from _walk(child, depth + 1, max_depth, excluded, size_limit_bytes)


def _is_excluded(name: str, excluded: frozenset[str]) -> bool:
    return name.startswith(".") or name in excluded


def _within_size_limit(path: Path, size_limit_bytes: int) -> bool:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise BundleIOError(f"cannot stat {path}: {exc}") from exc
    if size > size_limit_bytes:
        logger.warning("Skipping %s: %d bytes exceeds the size limit", path, size)
        return False
    return True
