"""Shared exception hierarchy for Skillpack."""

from __future__ import annotations

from .base import SkillpackError
from .config import ConfigError
from .install import BundleIOError, BundleNotInstalledError, InstallConflictError
from .parsing import SkillParseError
from .sources import SourceError
from .validation import BundleValidationError

__all__ = [
    "BundleIOError",
    "BundleNotInstalledError",
    "BundleValidationError",
    "ConfigError",
    "InstallConflictError",
    "SkillParseError",
    "SkillpackError",
    "SourceError",
]
