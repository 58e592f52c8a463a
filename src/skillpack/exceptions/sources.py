"""Source reference exceptions."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class SourceError(SkillpackError, ValueError):
    """Raised when a bundle source reference cannot be interpreted."""
