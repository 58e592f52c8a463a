"""Immutable entities passed between the scanner, validator and installer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillpack.exceptions.validation import ValidationError
from skillpack.types import InstallScope, OutcomeStatus, RunKind

FAILED_STATUSES: frozenset[str] = frozenset({"invalid", "conflict", "io_error"})


@dataclass(frozen=True)
class ParsedSkillDocument:
    """Parsed SKILL.md split into frontmatter and instructions body."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    body: str


@dataclass(frozen=True)
class BundleCandidate:
    """A directory holding a SKILL.md at its top level."""

    path: Path
    instructions: Path


@dataclass(frozen=True)
class SkillBundle:
    """A validated skill bundle."""

    name: str
    description: str
    source_path: Path
    license: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""


@dataclass(frozen=True)
class BundleValidation:
    """Validation outcome: either a bundle or the full list of violations."""

    candidate: BundleCandidate
    bundle: SkillBundle | None
    errors: tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.bundle is not None and not self.errors


@dataclass(frozen=True)
class InstallTarget:
    """Destination root for installed bundles."""

    root: Path
    scope: InstallScope = "project"

    def destination_for(self, name: str) -> Path:
        """Return the directory a bundle named *name* installs into."""
        return self.root / name


@dataclass(frozen=True)
class InstallReport:
    """Result of installing one bundle into one target."""

    name: str
    target: InstallTarget
    destination: Path
    status: OutcomeStatus
    digest: str


@dataclass(frozen=True)
class InstalledBundle:
    """A bundle found inside an install target."""

    name: str
    path: Path
    description: str | None = None
    source: str | None = None
    installed_at: str | None = None


@dataclass(frozen=True)
class BundleOutcome:
    """Per-bundle result of a scan, validate or install run."""

    path: Path
    name: str | None
    status: OutcomeStatus
    errors: tuple[ValidationError, ...] = ()
    message: str = ""
    destinations: tuple[Path, ...] = ()

    @property
    def failed(self) -> bool:
        return self.status in FAILED_STATUSES


@dataclass(frozen=True)
class RunResult:
    """Aggregated outcomes for every bundle found in a source."""

    source: str
    outcomes: tuple[BundleOutcome, ...]
    targets: tuple[InstallTarget, ...] = ()
    dry_run: bool = False
    kind: RunKind = "install"

    @property
    def failed(self) -> tuple[BundleOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.failed)

    @property
    def succeeded(self) -> tuple[BundleOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.failed)

    def status_counts(self) -> dict[str, int]:
        """Count outcomes by status."""
        counts: dict[str, int] = {}
        for outcome in self.outcomes:
            counts[outcome.status] = counts.get(outcome.status, 0) + 1
        return counts

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
