"""Root exception type for Skillpack."""

from __future__ import annotations


class SkillpackError(Exception):
    """Base class for all errors raised by Skillpack."""
