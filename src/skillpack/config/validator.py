"""Config file validation for Skillpack runs."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from skillpack.constants.config import CONFIG_FILENAME
from skillpack.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    LIST_OF_STRINGS_KEYS,
    POSITIVE_INT_KEYS,
    STRING_KEYS,
)
from skillpack.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillpack.yaml file and return all validation errors.

    This is the collect-all entry point used by ``skillpack validate-config``
    and by the preflight of every other command. It never raises; all
    problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in STRING_KEYS:
        if key in raw:
            val = raw[key]
            if not isinstance(val, str) or not val.strip():
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a non-empty string path",
                    )
                )

    for key in POSITIVE_INT_KEYS:
        if key in raw:
            val = raw[key]
            if isinstance(val, bool) or not isinstance(val, int):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a positive integer",
                    )
                )
            elif val <= 0:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field=key,
                        message=f"`{key}` must be a positive integer, got {val}",
                    )
                )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=key,
                        message=f"invalid type for `{key}`",
                        hint="expected a list of strings",
                    )
                )

    return errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="",
                message=f"project root does not exist: {resolved_root}",
            )
        ]
    config_explicit = config_path is not None
    return sort_errors(validate_config_file(root, config_path, config_explicit=config_explicit))


def suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a did-you-mean hint for an unknown key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
