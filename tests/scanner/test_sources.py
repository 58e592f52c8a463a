"""Tests for source reference parsing and git checkout."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from skillpack.exceptions import BundleIOError, SourceError
from skillpack.scanner import open_source, parse_source


def test_local_directory_source(tmp_path: Path) -> None:
    source = parse_source(str(tmp_path))

    assert source.local_path == tmp_path
    assert not source.is_remote


def test_local_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("x", encoding="utf-8")

    with pytest.raises(SourceError):
        parse_source(str(path))


@pytest.mark.parametrize(
    "ref",
    [
        "https://github.com/acme/skills.git",
        "https://gitlab.com/acme/skills",
        "git@github.com:acme/skills.git",
        "ssh://git@example.com/acme/skills",
    ],
)
def test_git_urls_are_remote(ref: str) -> None:
    source = parse_source(ref)

    assert source.is_remote
    assert source.git_url == ref


def test_github_shorthand_expands() -> None:
    source = parse_source("acme/skills")

    assert source.git_url == "https://github.com/acme/skills.git"
    assert source.subpath is None


def test_github_shorthand_with_subpath() -> None:
    source = parse_source("acme/skills/bundles/sql-helper")

    assert source.git_url == "https://github.com/acme/skills.git"
    assert source.subpath == "bundles/sql-helper"


@pytest.mark.parametrize("ref", ["", "   ", "./does-not-exist", "not a source"])
def test_unrecognized_sources_raise(ref: str) -> None:
    with pytest.raises(SourceError):
        parse_source(ref)


def test_open_local_source_yields_path(tmp_path: Path) -> None:
    with open_source(str(tmp_path)) as root:
        assert root == tmp_path


def test_open_remote_source_clones_and_cleans_up() -> None:
    seen: dict[str, Path] = {}

    def fake_run(command, **kwargs):
        destination = Path(command[-1])
        (destination / "bundles" / "demo").mkdir(parents=True)
        seen["destination"] = destination
        return subprocess.CompletedProcess(command, 0, "", "")

    with patch("skillpack.scanner.sources.subprocess.run", side_effect=fake_run) as run:
        with open_source("acme/skills/bundles", ref_name="v1") as root:
            assert root == seen["destination"] / "bundles"
            assert (root / "demo").is_dir()

    command = run.call_args.args[0]
    assert command[:4] == ["git", "clone", "--depth", "1"]
    assert ["--branch", "v1"] == command[5:7]
    assert command[-3:-1] == ["--", "https://github.com/acme/skills.git"]
    assert not seen["destination"].exists()


def test_clone_failure_raises_io_error() -> None:
    error = subprocess.CalledProcessError(128, ["git"], stderr="fatal: repository not found")
    with patch("skillpack.scanner.sources.subprocess.run", side_effect=error):
        with pytest.raises(BundleIOError, match="repository not found"):
            with open_source("https://example.com/missing.git"):
                pass


def test_missing_git_binary_raises_io_error() -> None:
    with patch("skillpack.scanner.sources.subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(BundleIOError, match="not found"):
            with open_source("https://example.com/repo.git"):
                pass


def test_missing_subpath_raises_source_error() -> None:
    def fake_run(command, **kwargs):
        Path(command[-1]).mkdir(parents=True)
        return subprocess.CompletedProcess(command, 0, "", "")

    with patch("skillpack.scanner.sources.subprocess.run", side_effect=fake_run):
        with pytest.raises(SourceError):
            with open_source("acme/skills/nope"):
                pass


@pytest.mark.parametrize("ref", ["acme/skills/..", "acme/skills/../..", "acme/skills/bundles/../../etc"])
def test_shorthand_subpath_cannot_leave_repository(ref: str) -> None:
    with pytest.raises(SourceError, match="inside the repository"):
        parse_source(ref)


def test_option_like_url_is_passed_after_separator() -> None:
    with patch("skillpack.scanner.sources.subprocess.run") as run:
        with pytest.raises(SourceError):
            with open_source("--upload-pack=touch-pwned.git"):
                pass

    command = run.call_args.args[0]
    assert command.index("--") < command.index("--upload-pack=touch-pwned.git")
    assert command[-3] == "--"
