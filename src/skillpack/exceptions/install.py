"""Installation-related exceptions."""

from __future__ import annotations

from pathlib import Path

from skillpack.exceptions.base import SkillpackError


class BundleIOError(SkillpackError, OSError):
    """Raised when a filesystem or network operation on a bundle fails.

    The original error is chained as ``__cause__``. Nothing is retried, and
    a failure in the middle of a copy may leave a partial tree behind.
    """


class InstallConflictError(SkillpackError):
    """Raised when a bundle cannot be placed at its destination.

    Usually a different bundle with the same name is already installed; the
    destination may also overlap the bundle's own source tree.
    """

    def __init__(self, name: str, destination: Path, message: str | None = None) -> None:
        self.name = name
        self.destination = destination
        super().__init__(
            message
            or f"a different bundle named '{name}' is already installed at {destination} (use --overwrite to replace it)"
        )


class BundleNotInstalledError(SkillpackError):
    """Raised when uninstalling a bundle that is not present in the target."""

    def __init__(self, name: str, root: Path) -> None:
        self.name = name
        self.root = root
        super().__init__(f"no bundle named '{name}' is installed in {root}")
