"""Tests for the scan -> validate -> install pipeline."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from skillpack.config import SkillpackConfig
from skillpack.constants.validation import SKILL005
from skillpack.exceptions import BundleIOError
from skillpack.installer import install_bundle as real_install
from skillpack.installer import resolve_install_targets
from skillpack.model import InstallTarget
from skillpack.pipeline import run_install, run_validate


@pytest.fixture()
def config(project_root: Path) -> SkillpackConfig:
    return SkillpackConfig(project_root=project_root)


@pytest.fixture()
def target(tmp_path: Path) -> InstallTarget:
    return InstallTarget(root=tmp_path / "installed")


def _by_path(result) -> dict[str, str]:
    return {outcome.path.name: outcome.status for outcome in result.outcomes}


def test_valid_bundles_are_installed(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(source_root / "alpha", name="alpha")
    make_bundle(source_root / "beta", name="beta")

    result = run_install(str(source_root), config, targets=(target,))

    assert _by_path(result) == {"alpha": "installed", "beta": "installed"}
    assert result.exit_code == 0
    assert (target.root / "alpha" / "SKILL.md").is_file()
    assert (target.root / "beta" / "SKILL.md").is_file()


def test_invalid_bundle_does_not_stop_siblings(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(source_root / "bad", name="Bad_Name")
    make_bundle(source_root / "good", name="good")

    result = run_install(str(source_root), config, targets=(target,))

    assert _by_path(result) == {"bad": "invalid", "good": "installed"}
    bad = next(outcome for outcome in result.outcomes if outcome.status == "invalid")
    assert [error.code for error in bad.errors] == [SKILL005]
    assert not (target.root / "Bad_Name").exists()
    assert result.exit_code == 1


def test_conflict_is_bundle_scoped(source_root: Path, tmp_path: Path, make_bundle, config, target) -> None:
    make_bundle(target.root / "foo", name="foo", description="Already here.")
    make_bundle(source_root / "foo", name="foo", description="New foo.")
    make_bundle(source_root / "bar", name="bar")

    result = run_install(str(source_root), config, targets=(target,))

    assert _by_path(result) == {"bar": "installed", "foo": "conflict"}
    assert "Already here." in (target.root / "foo" / "SKILL.md").read_text(encoding="utf-8")


def test_overwrite_replaces_existing(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(target.root / "foo", name="foo", description="Already here.")
    make_bundle(source_root / "foo", name="foo", description="New foo.")

    result = run_install(str(source_root), config, targets=(target,), overwrite=True)

    assert _by_path(result) == {"foo": "replaced"}
    assert "New foo." in (target.root / "foo" / "SKILL.md").read_text(encoding="utf-8")


def test_duplicate_names_in_source_are_both_rejected(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(source_root / "one", name="same")
    make_bundle(source_root / "two", name="same", description="Other.")

    result = run_install(str(source_root), config, targets=(target,))

    assert _by_path(result) == {"one": "conflict", "two": "conflict"}
    assert not (target.root / "same").exists()


def test_io_failure_is_bundle_scoped(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(source_root / "alpha", name="alpha")
    make_bundle(source_root / "beta", name="beta")

    def flaky_install(bundle, install_target, *, overwrite=False):
        if bundle.name == "alpha":
            raise BundleIOError("disk full")
        return real_install(bundle, install_target, overwrite=overwrite)

    with patch("skillpack.pipeline.install_bundle", side_effect=flaky_install):
        result = run_install(str(source_root), config, targets=(target,))

    assert _by_path(result) == {"alpha": "io_error", "beta": "installed"}
    assert result.failed[0].message == "disk full"


def test_multiple_targets_receive_bundle(source_root: Path, tmp_path: Path, make_bundle, config) -> None:
    make_bundle(source_root / "foo", name="foo")
    targets = (InstallTarget(root=tmp_path / "t1"), InstallTarget(root=tmp_path / "t2", scope="global"))

    result = run_install(str(source_root), config, targets=targets)

    (outcome,) = result.outcomes
    assert outcome.status == "installed"
    assert outcome.destinations == (tmp_path / "t1" / "foo", tmp_path / "t2" / "foo")


def test_dry_run_copies_nothing(source_root: Path, make_bundle, config, target) -> None:
    make_bundle(source_root / "foo", name="foo")

    result = run_install(str(source_root), config, targets=(target,), dry_run=True)

    assert _by_path(result) == {"foo": "valid"}
    assert not target.root.exists()


def test_run_validate_reports_every_bundle(source_root: Path, make_bundle, config) -> None:
    make_bundle(source_root / "ok", name="ok")
    make_bundle(source_root / "missing", name="missing", description=None)

    result = run_validate(str(source_root), config)

    assert _by_path(result) == {"missing": "invalid", "ok": "valid"}
    assert result.status_counts() == {"invalid": 1, "valid": 1}
    assert result.kind == "validate"


def test_empty_source_has_no_outcomes(source_root: Path, config, target) -> None:
    result = run_install(str(source_root), config, targets=(target,))

    assert result.outcomes == ()
    assert result.exit_code == 0


def test_project_root_bundle_is_not_installed_into_itself(project_root: Path, make_bundle, config) -> None:
    make_bundle(project_root, name="proj")

    result = run_install(str(project_root), config, targets=resolve_install_targets(config))

    assert _by_path(result) == {"project": "conflict"}
    assert result.exit_code == 1
    assert not (project_root / ".agents").exists()
