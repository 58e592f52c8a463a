"""Tests for config loading and collect-all validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillpack.config import SkillpackConfig, load_config, preflight_validate, suggest_key, validate_config_file
from skillpack.constants.validation import ALLOWED_CONFIG_KEYS, CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from skillpack.exceptions import ConfigError
from skillpack.exceptions.validation import ValidationError, format_errors


def _write_config(root: Path, content: str) -> Path:
    cfg = root / "skillpack.yaml"
    cfg.write_text(content, encoding="utf-8")
    return cfg


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SkillpackConfig(project_root=tmp_path.resolve())
    assert config.project_install_root == (tmp_path / ".agents" / "skills").resolve()


def test_load_config_reads_values(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "project_dir: skills\nglobal_dir: /opt/skills\nmax_depth: 2\nmax_file_mb: 5\nexclude_dirs: [vendor]\n",
    )

    config = load_config(tmp_path)

    assert config.project_install_root == (tmp_path / "skills").resolve()
    assert config.global_install_root == Path("/opt/skills").resolve()
    assert config.max_depth == 2
    assert config.max_file_mb == 5
    assert config.exclude_dirs == ("vendor",)


def test_global_dir_expands_user(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert SkillpackConfig(global_dir="~/skills").global_install_root == (tmp_path / "skills").resolve()


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path) == SkillpackConfig(project_root=tmp_path.resolve())


@pytest.mark.parametrize(
    "content",
    ["max_depth: 0\n", "max_file_mb: true\n", "exclude_dirs: vendor\n", "project_dir: ''\n", "- a\n", "a: [b\n"],
)
def test_load_config_rejects_bad_values(tmp_path: Path, content: str) -> None:
    _write_config(tmp_path, content)

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_validate_collects_all_errors(tmp_path: Path) -> None:
    cfg = _write_config(tmp_path, "project_dri: x\nmax_depth: -1\nmax_file_mb: big\nexclude_dirs: [1]\n")

    errors = validate_config_file(tmp_path, cfg, config_explicit=True)

    codes = sorted(error.code for error in errors)
    assert codes == [CFG004, CFG005, CFG005, CFG006]
    unknown = next(error for error in errors if error.code == CFG004)
    assert unknown.hint == "did you mean `project_dir`?"


@pytest.mark.parametrize(
    ("content", "code"),
    [("a: [b\n", CFG002), ("- a\n", CFG003)],
)
def test_validate_structural_errors(tmp_path: Path, content: str, code: str) -> None:
    cfg = _write_config(tmp_path, content)

    assert [error.code for error in validate_config_file(tmp_path, cfg)] == [code]


def test_validate_missing_explicit_config(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert [error.code for error in errors] == [CFG001]


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert [error.code for error in errors] == [CFG007]


def test_preflight_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write_config(tmp_path, "max_depth: 3\n")

    assert preflight_validate(tmp_path) == []


def test_suggest_key_without_match() -> None:
    assert suggest_key("zzzzzz", ALLOWED_CONFIG_KEYS) == ""


def test_format_errors_is_sorted() -> None:
    errors = [
        ValidationError(code="CFG005", path="b.yaml", field="x", message="second"),
        ValidationError(code="CFG004", path="a.yaml", field="y", message="first", hint="a hint", line=3, column=2),
    ]

    assert format_errors(errors).splitlines() == [
        "[CFG004] a.yaml:3:2 first (a hint)",
        "[CFG005] b.yaml second",
    ]
