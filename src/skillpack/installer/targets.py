"""Install target resolution."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from skillpack.config import SkillpackConfig
from skillpack.model import InstallTarget


def resolve_install_targets(
    config: SkillpackConfig,
    *,
    global_install: bool = False,
    explicit: Sequence[Path] = (),
) -> tuple[InstallTarget, ...]:
    """Resolve where bundles should be installed.

    Explicit target directories win. Otherwise the project-local root is used
    unless *global_install* is set.
    """
    if explicit:
        seen: dict[Path, InstallTarget] = {}
        for path in explicit:
            resolved = path.expanduser().resolve()
            seen.setdefault(resolved, InstallTarget(root=resolved, scope="project"))
        return tuple(seen.values())
    if global_install:
        return (InstallTarget(root=config.global_install_root, scope="global"),)
    return (InstallTarget(root=config.project_install_root, scope="project"),)
