"""Scan, validate and install orchestration.

Each bundle moves through scanner -> validator -> installer on its own.
Validation failures, conflicts and I/O errors are recorded on that bundle's
outcome and never stop its siblings from being processed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from skillpack.config import SkillpackConfig
from skillpack.exceptions import BundleIOError, InstallConflictError
from skillpack.installer import install_bundle
from skillpack.model import (
    BundleCandidate,
    BundleOutcome,
    BundleValidation,
    InstallReport,
    InstallTarget,
    RunResult,
)
from skillpack.scanner import iter_bundle_candidates, open_source
from skillpack.types import OutcomeStatus
from skillpack.validation import validate_bundle

logger = logging.getLogger(__name__)


def run_validate(source: str, config: SkillpackConfig, *, ref_name: str | None = None) -> RunResult:
    """Scan *source* and validate every bundle found, without installing."""
    with open_source(source, ref_name=ref_name) as root:
        outcomes = tuple(_validation_outcome(result) for result in _validate_all(root, config))
    return RunResult(source=source, outcomes=outcomes, dry_run=True, kind="validate")


def run_install(
    source: str,
    config: SkillpackConfig,
    *,
    targets: Sequence[InstallTarget],
    overwrite: bool = False,
    dry_run: bool = False,
    ref_name: str | None = None,
) -> RunResult:
    """Scan *source*, validate each bundle and install the valid ones into *targets*."""
    outcomes: list[BundleOutcome] = []
    with open_source(source, ref_name=ref_name) as root:
        validations = _validate_all(root, config)
        duplicates = _duplicate_names(validations)
        for result in validations:
            if result.bundle is None:
                outcomes.append(_validation_outcome(result))
                continue
            if result.bundle.name in duplicates:
                message = f"name '{result.bundle.name}' is declared by more than one bundle in the source"
                logger.warning("%s: %s", result.candidate.path, message)
                outcomes.append(
                    BundleOutcome(
                        path=result.candidate.path, name=result.bundle.name, status="conflict", message=message
                    )
                )
                continue
            if dry_run:
                outcomes.append(_validation_outcome(result))
                continue
            outcomes.append(_install_outcome(result, targets, overwrite=overwrite))

    run = RunResult(source=source, outcomes=tuple(outcomes), targets=tuple(targets), dry_run=dry_run)
    logger.info(
        "Processed %d bundle(s) from %s: %d succeeded, %d failed",
        len(run.outcomes),
        source,
        len(run.succeeded),
        len(run.failed),
    )
    return run


def _validate_all(root: Path, config: SkillpackConfig) -> list[BundleValidation]:
    candidates: list[BundleCandidate] = list(
        iter_bundle_candidates(
            root,
            max_depth=config.max_depth,
            max_file_mb=config.max_file_mb,
            exclude_dirs=config.exclude_dirs,
        )
    )
    logger.debug("Found %d candidate bundle(s) in %s", len(candidates), root)
    return [validate_bundle(candidate) for candidate in candidates]


def _duplicate_names(validations: Sequence[BundleValidation]) -> frozenset[str]:
    counts: dict[str, int] = {}
    for result in validations:
        if result.bundle is not None:
            counts[result.bundle.name] = counts.get(result.bundle.name, 0) + 1
    return frozenset(name for name, count in counts.items() if count > 1)


def _validation_outcome(result: BundleValidation) -> BundleOutcome:
    if result.bundle is not None:
        return BundleOutcome(path=result.candidate.path, name=result.bundle.name, status="valid")
    logger.warning("Bundle %s failed validation with %d error(s)", result.candidate.path, len(result.errors))
    return BundleOutcome(
        path=result.candidate.path,
        name=None,
        status="invalid",
        errors=result.errors,
        message=f"{len(result.errors)} validation error(s)",
    )


def _install_outcome(
    result: BundleValidation,
    targets: Sequence[InstallTarget],
    *,
    overwrite: bool,
) -> BundleOutcome:
    assert result.bundle is not None
    bundle = result.bundle
    reports: list[InstallReport] = []
    for target in targets:
        try:
            reports.append(install_bundle(bundle, target, overwrite=overwrite))
        except InstallConflictError as exc:
            logger.warning("Conflict installing '%s': %s", bundle.name, exc)
            return _failed(bundle.name, result, "conflict", str(exc), reports)
        except BundleIOError as exc:
            logger.warning("I/O failure installing '%s': %s", bundle.name, exc)
            return _failed(bundle.name, result, "io_error", str(exc), reports)

    status = _combined_status(reports)
    return BundleOutcome(
        path=result.candidate.path,
        name=bundle.name,
        status=status,
        destinations=tuple(report.destination for report in reports),
    )


def _failed(
    name: str,
    result: BundleValidation,
    status: OutcomeStatus,
    message: str,
    reports: Sequence[InstallReport],
) -> BundleOutcome:
    return BundleOutcome(
        path=result.candidate.path,
        name=name,
        status=status,
        message=message,
        destinations=tuple(report.destination for report in reports),
    )


def _combined_status(reports: Sequence[InstallReport]) -> OutcomeStatus:
    statuses = {report.status for report in reports}
    if "replaced" in statuses:
        return "replaced"
    if "installed" in statuses:
        return "installed"
    return "unchanged"
