"""Copy validated bundles into install targets."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from skillpack.constants.discovery import ALWAYS_EXCLUDED_DIRS, SKILL_MARKDOWN_FILENAME
from skillpack.constants.install import INSTALL_RECORD_FILENAME
from skillpack.exceptions import (
    BundleIOError,
    BundleNotInstalledError,
    BundleValidationError,
    InstallConflictError,
    SkillParseError,
)
from skillpack.installer.record import build_install_record, read_install_record, write_install_record
from skillpack.io import directory_sha256
from skillpack.model import InstalledBundle, InstallReport, InstallTarget, SkillBundle
from skillpack.parsers import parse_skill_markdown_file
from skillpack.types import OutcomeStatus
from skillpack.validation import validate_name

logger = logging.getLogger(__name__)


def bundle_digest(path: Path) -> str:
    """Content digest of a bundle tree, ignoring the install record and VCS metadata."""
    try:
        return directory_sha256(path, exclude=(INSTALL_RECORD_FILENAME,), skip_dirs=ALWAYS_EXCLUDED_DIRS)
    except OSError as exc:
        raise BundleIOError(f"cannot read bundle tree {path}: {exc}") from exc


def install_bundle(bundle: SkillBundle, target: InstallTarget, *, overwrite: bool = False) -> InstallReport:
    """Copy *bundle* into ``target.root / bundle.name``.

    An identical bundle already at the destination is left as is. A
    different one raises ``InstallConflictError`` unless *overwrite* is set,
    in which case it is removed and replaced. A destination that overlaps
    the bundle's source tree is refused before anything is copied.
    Filesystem failures raise ``BundleIOError``; a failed copy may leave a
    partial tree.
    """
    destination = target.destination_for(bundle.name)
    _check_no_overlap(bundle, destination)
    digest = bundle_digest(bundle.source_path)
    status: OutcomeStatus = "installed"

    if destination.is_symlink() or destination.exists():
        if destination.is_dir() and not destination.is_symlink() and bundle_digest(destination) == digest:
            logger.info("Bundle '%s' is already up to date in %s", bundle.name, target.root)
            return InstallReport(
                name=bundle.name, target=target, destination=destination, status="unchanged", digest=digest
            )
        if not overwrite:
            raise InstallConflictError(bundle.name, destination)
        _remove_path(destination)
        status = "replaced"

    try:
        target.root.mkdir(parents=True, exist_ok=True)
        shutil.copytree(
            bundle.source_path,
            destination,
            symlinks=True,
            ignore=_copy_ignore(bundle.source_path),
        )
        write_install_record(destination, build_install_record(bundle, target, digest))
    except (OSError, shutil.Error) as exc:
        raise BundleIOError(f"failed to install '{bundle.name}' into {destination}: {exc}") from exc

    logger.info("Installed '%s' into %s", bundle.name, destination)
    return InstallReport(name=bundle.name, target=target, destination=destination, status=status, digest=digest)


def uninstall_bundle(name: str, target: InstallTarget) -> Path:
    """Remove an installed bundle and return the removed path.

    *name* must be a valid skill name, so it always resolves to a direct
    child of ``target.root``.
    """
    errors = validate_name(name, str(target.root))
    if errors:
        raise BundleValidationError(errors)
    destination = target.destination_for(name)
    if destination.resolve().parent != target.root.resolve():
        raise BundleNotInstalledError(name, target.root)
    if not (destination / SKILL_MARKDOWN_FILENAME).is_file():
        raise BundleNotInstalledError(name, target.root)
    _remove_path(destination)
    logger.info("Removed '%s' from %s", name, target.root)
    return destination


def list_installed(target: InstallTarget) -> list[InstalledBundle]:
    """Enumerate bundles installed directly under ``target.root``."""
    if not target.root.is_dir():
        return []
    try:
        children = sorted(path for path in target.root.iterdir() if path.is_dir())
    except OSError as exc:
        raise BundleIOError(f"cannot list install target {target.root}: {exc}") from exc

    installed: list[InstalledBundle] = []
    for child in children:
        instructions = child / SKILL_MARKDOWN_FILENAME
        if not instructions.is_file():
            continue
        description: str | None = None
        try:
            frontmatter = parse_skill_markdown_file(instructions).frontmatter or {}
        except (OSError, SkillParseError) as exc:
            logger.warning("Cannot read installed bundle %s: %s", child, exc)
            frontmatter = {}
        if isinstance(frontmatter.get("description"), str):
            description = frontmatter["description"].strip()
        record = read_install_record(child) or {}
        installed.append(
            InstalledBundle(
                name=child.name,
                path=child,
                description=description,
                source=_str_or_none(record.get("source")),
                installed_at=_str_or_none(record.get("installed_at")),
            )
        )
    return installed


def _check_no_overlap(bundle: SkillBundle, destination: Path) -> None:
    """Refuse destinations inside the source tree, or sources inside the destination."""
    source = bundle.source_path.resolve()
    resolved = destination.resolve()
    if resolved == source:
        return
    if resolved.is_relative_to(source) or source.is_relative_to(resolved):
        raise InstallConflictError(
            bundle.name,
            destination,
            f"install destination {destination} overlaps the source of bundle '{bundle.name}' at {source}",
        )


def _copy_ignore(source: Path) -> Callable[[str, list[str]], set[str]]:
    """Skip VCS metadata everywhere and a stale install record at the bundle root."""

    def ignore(directory: str, names: list[str]) -> set[str]:
        ignored = {name for name in names if name in ALWAYS_EXCLUDED_DIRS}
        if Path(directory) == source and INSTALL_RECORD_FILENAME in names:
            ignored.add(INSTALL_RECORD_FILENAME)
        return ignored

    return ignore


def _remove_path(path: Path) -> None:
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise BundleIOError(f"cannot remove {path}: {exc}") from exc


def _str_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None
