"""Core data models for Skillpack."""

from .entities import (
    BundleCandidate,
    BundleOutcome,
    BundleValidation,
    InstalledBundle,
    InstallReport,
    InstallTarget,
    ParsedSkillDocument,
    RunResult,
    SkillBundle,
)

__all__ = [
    "BundleCandidate",
    "BundleOutcome",
    "BundleValidation",
    "InstallReport",
    "InstallTarget",
    "InstalledBundle",
    "ParsedSkillDocument",
    "RunResult",
    "SkillBundle",
]
