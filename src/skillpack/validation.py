"""Frontmatter validation for skill bundles.

Every constraint is checked in a single pass so callers can surface a
complete error report. Nothing here touches the filesystem beyond reading
the bundle's SKILL.md.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from skillpack.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillpack.constants.parsing import (
    REQUIRED_FRONTMATTER_FIELDS,
    SKILL_NAME_MAX_LENGTH,
    SKILL_NAME_PATTERN,
)
from skillpack.constants.validation import (
    SKILL001,
    SKILL002,
    SKILL003,
    SKILL004,
    SKILL005,
    SKILL006,
    SKILL007,
)
from skillpack.exceptions import BundleValidationError, SkillParseError
from skillpack.exceptions.validation import ValidationError, sort_errors
from skillpack.model import BundleCandidate, BundleValidation, SkillBundle
from skillpack.parsers import parse_skill_markdown_file


def validate_name(name: str, path: str = "", *, field: str = "name") -> list[ValidationError]:
    """Check the name pattern and the length limit independently."""
    errors: list[ValidationError] = []
    if not SKILL_NAME_PATTERN.fullmatch(name):
        errors.append(
            ValidationError(
                code=SKILL005,
                path=path,
                field=field,
                message=f"invalid skill name {name!r}",
                hint="use lowercase letters, digits and single hyphens, e.g. `my-skill`",
            )
        )
    if len(name) > SKILL_NAME_MAX_LENGTH:
        errors.append(
            ValidationError(
                code=SKILL006,
                path=path,
                field=field,
                message=f"skill name is {len(name)} characters long",
                hint=f"maximum is {SKILL_NAME_MAX_LENGTH}",
            )
        )
    return errors


def validate_frontmatter(frontmatter: Mapping[str, Any], path: str = "") -> list[ValidationError]:
    """Validate a parsed frontmatter mapping and return every violation."""
    errors: list[ValidationError] = []

    for key in REQUIRED_FRONTMATTER_FIELDS:
        if frontmatter.get(key) is None:
            errors.append(
                ValidationError(
                    code=SKILL003,
                    path=path,
                    field=key,
                    message=f"missing required field `{key}`",
                )
            )

    name = frontmatter.get("name")
    if name is not None:
        if isinstance(name, str):
            errors.extend(validate_name(name, path))
        else:
            errors.append(_type_error(path, "name", name, "a string"))

    description = frontmatter.get("description")
    if description is not None:
        if not isinstance(description, str):
            errors.append(_type_error(path, "description", description, "a string"))
        elif not description.strip():
            errors.append(
                ValidationError(
                    code=SKILL007,
                    path=path,
                    field="description",
                    message="`description` must not be empty",
                )
            )

    license_value = frontmatter.get("license")
    if license_value is not None and not isinstance(license_value, str):
        errors.append(_type_error(path, "license", license_value, "a string"))

    metadata = frontmatter.get("metadata")
    if metadata is not None and not isinstance(metadata, dict):
        errors.append(_type_error(path, "metadata", metadata, "a mapping"))

    return sort_errors(errors)


def validate_bundle(candidate: BundleCandidate) -> BundleValidation:
    """Parse and validate a candidate bundle's SKILL.md."""
    path_str = str(candidate.instructions)
    try:
        parsed = parse_skill_markdown_file(candidate.instructions)
    except SkillParseError as exc:
        error = ValidationError(code=SKILL002, path=path_str, field="", message=str(exc))
        return BundleValidation(candidate=candidate, bundle=None, errors=(error,))
    except OSError as exc:
        error = ValidationError(
            code=SKILL001,
            path=path_str,
            field="",
            message=f"cannot read instructions document: {exc}",
        )
        return BundleValidation(candidate=candidate, bundle=None, errors=(error,))

    frontmatter = parsed.frontmatter or {}
    errors = validate_frontmatter(frontmatter, path_str)
    if errors:
        return BundleValidation(candidate=candidate, bundle=None, errors=tuple(errors))

    bundle = SkillBundle(
        name=frontmatter["name"],
        description=frontmatter["description"].strip(),
        source_path=candidate.path,
        license=frontmatter.get("license"),
        metadata=dict(frontmatter.get("metadata") or {}),
        body=parsed.body,
    )
    return BundleValidation(candidate=candidate, bundle=bundle)


def require_valid(candidate: BundleCandidate) -> SkillBundle:
    """Return the validated bundle or raise ``BundleValidationError``."""
    result = validate_bundle(candidate)
    if result.bundle is None:
        raise BundleValidationError(result.errors)
    return result.bundle


def candidate_for(path: Path) -> BundleCandidate:
    """Build a candidate for a bundle directory without scanning."""
    return BundleCandidate(path=path, instructions=path / SKILL_MARKDOWN_FILENAME)


def _type_error(path: str, field: str, value: object, expected: str) -> ValidationError:
    return ValidationError(
        code=SKILL004,
        path=path,
        field=field,
        message=f"invalid type for `{field}`",
        hint=f"expected {expected}; got {type(value).__name__}",
    )
