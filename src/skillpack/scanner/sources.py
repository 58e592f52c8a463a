"""Resolve bundle source references to local directories.

A source is either a local directory or a git repository reference. Git
sources are shallow-cloned into a temporary directory for the duration of
``open_source``.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from skillpack.constants.sources import (
    CLONE_TEMP_PREFIX,
    GIT_EXECUTABLE,
    GIT_URL_PREFIXES,
    GIT_URL_SUFFIX,
    GITHUB_BASE_URL,
    GITHUB_SHORTHAND_PATTERN,
)
from skillpack.exceptions import BundleIOError, SourceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceRef:
    """A classified source reference."""

    raw: str
    local_path: Path | None = None
    git_url: str | None = None
    subpath: str | None = None

    @property
    def is_remote(self) -> bool:
        return self.git_url is not None


def parse_source(ref: str) -> SourceRef:
    """Classify *ref* as a local directory, git URL or ``owner/repo`` shorthand."""
    raw = ref.strip()
    if not raw:
        raise SourceError("source reference is empty")

    local = Path(raw).expanduser()
    if local.exists():
        if not local.is_dir():
            raise SourceError(f"source is not a directory: {local}")
        return SourceRef(raw=raw, local_path=local)

    if raw.startswith(GIT_URL_PREFIXES) or raw.endswith(GIT_URL_SUFFIX):
        return SourceRef(raw=raw, git_url=raw)

    match = GITHUB_SHORTHAND_PATTERN.match(raw)
    if match and not raw.startswith((".", "/", "~")):
        repo = match.group("repo")
        subpath = match.group("subpath")
        if subpath and ".." in PurePosixPath(subpath).parts:
            raise SourceError(f"source subpath must stay inside the repository: {raw}")
        if repo.endswith(GIT_URL_SUFFIX):
            repo = repo[: -len(GIT_URL_SUFFIX)]
        return SourceRef(
            raw=raw,
            git_url=f"{GITHUB_BASE_URL}/{match.group('owner')}/{repo}{GIT_URL_SUFFIX}",
            subpath=subpath,
        )

    raise SourceError(f"source is neither an existing directory nor a git repository reference: {raw}")


@contextmanager
def open_source(ref: str | SourceRef, *, ref_name: str | None = None) -> Iterator[Path]:
    """Yield a local directory holding the contents of *ref*.

    Remote sources are cloned into a temporary directory that is removed
    when the context exits.
    """
    source = parse_source(ref) if isinstance(ref, str) else ref
    if source.local_path is not None:
        yield source.local_path
        return

    assert source.git_url is not None
    with tempfile.TemporaryDirectory(prefix=CLONE_TEMP_PREFIX) as temp_dir:
        checkout = Path(temp_dir) / "repo"
        clone_repository(source.git_url, checkout, ref_name=ref_name)
        root = checkout / source.subpath if source.subpath else checkout
        if not root.resolve().is_relative_to(checkout.resolve()):
            raise SourceError(f"path '{source.subpath}' escapes the checkout of {source.git_url}")
        if not root.is_dir():
            raise SourceError(f"path '{source.subpath}' does not exist in {source.git_url}")
        yield root


def clone_repository(url: str, destination: Path, *, ref_name: str | None = None) -> None:
    """Shallow-clone *url* into *destination*, raising ``BundleIOError`` on failure."""
    command = [GIT_EXECUTABLE, "clone", "--depth", "1", "--quiet"]
    if ref_name:
        command.extend(["--branch", ref_name])
    command.extend(["--", url, str(destination)])

    logger.info("Cloning %s", url)
    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise BundleIOError(f"'{GIT_EXECUTABLE}' executable not found; cannot fetch {url}") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise BundleIOError(f"failed to clone {url}: {detail}") from exc
