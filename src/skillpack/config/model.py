"""Config data model for Skillpack runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillpack.constants.config import (
    DEFAULT_CONFIG_EXCLUDE_DIRS,
    DEFAULT_CONFIG_MAX_DEPTH,
    DEFAULT_CONFIG_MAX_FILE_MB,
    DEFAULT_GLOBAL_DIR,
    DEFAULT_PROJECT_DIR,
)


@dataclass(frozen=True)
class SkillpackConfig:
    """Resolved skillpack config."""

    project_root: Path = Path(".")
    project_dir: str = DEFAULT_PROJECT_DIR
    global_dir: str = DEFAULT_GLOBAL_DIR
    max_depth: int = DEFAULT_CONFIG_MAX_DEPTH
    max_file_mb: int = DEFAULT_CONFIG_MAX_FILE_MB
    exclude_dirs: tuple[str, ...] = DEFAULT_CONFIG_EXCLUDE_DIRS

    @property
    def project_install_root(self) -> Path:
        """Project-local install root; relative paths resolve against the project root."""
        path = Path(self.project_dir).expanduser()
        if not path.is_absolute():
            path = self.project_root / path
        return path.resolve()

    @property
    def global_install_root(self) -> Path:
        """Global install root with ``~`` expanded."""
        return Path(self.global_dir).expanduser().resolve()
