"""File-level helpers for hashing bundle content."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

from skillpack.constants.install import DIGEST_CHUNK_SIZE


def file_sha256(path: Path) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(DIGEST_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def directory_sha256(root: Path, *, exclude: Iterable[str] = (), skip_dirs: Iterable[str] = ()) -> str:
    """Return a SHA-256 digest over the relative paths and contents of a tree.

    Files are visited in sorted POSIX-path order. Top-level entries named in
    *exclude* are skipped, and so is any entry whose path contains a name in
    *skip_dirs*. Symlinks are hashed by their target path, not
    followed.
    """
    excluded = frozenset(exclude)
    skipped = frozenset(skip_dirs)
    digest = hashlib.sha256()
    entries = sorted(
        (path for path in root.rglob("*") if path.is_file() or path.is_symlink()),
        key=lambda path: path.relative_to(root).as_posix(),
    )
    for path in entries:
        relative = path.relative_to(root)
        if relative.parts[0] in excluded or skipped.intersection(relative.parts):
            continue
        digest.update(relative.as_posix().encode("utf-8"))
        digest.update(b"\0")
        if path.is_symlink():
            digest.update(b"link:" + str(path.readlink()).encode("utf-8"))
        else:
            digest.update(file_sha256(path).encode("ascii"))
        digest.update(b"\n")
    return digest.hexdigest()
