"""Configuration loading and validation for Skillpack runs."""

from __future__ import annotations

from skillpack.config.loader import load_config
from skillpack.config.model import SkillpackConfig
from skillpack.config.validator import preflight_validate, suggest_key, validate_config_file

__all__ = [
    "SkillpackConfig",
    "load_config",
    "preflight_validate",
    "suggest_key",
    "validate_config_file",
]
