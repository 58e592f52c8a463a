"""Install records written next to each installed bundle."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import suppress
from datetime import UTC, datetime
from pathlib import Path

from skillpack import __version__
from skillpack.constants.install import (
    INSTALL_RECORD_FILENAME,
    INSTALL_RECORD_SCHEMA_VERSION,
    RECORD_TEMP_PREFIX,
    RECORD_TEMP_SUFFIX,
)
from skillpack.model import InstallTarget, SkillBundle
from skillpack.types import JsonObject

logger = logging.getLogger(__name__)


def build_install_record(bundle: SkillBundle, target: InstallTarget, digest: str) -> JsonObject:
    """Build the JSON payload describing an installed bundle."""
    return {
        "schema_version": INSTALL_RECORD_SCHEMA_VERSION,
        "name": bundle.name,
        "description": bundle.description,
        "license": bundle.license,
        "source": str(bundle.source_path),
        "scope": target.scope,
        "digest": digest,
        "installed_at": datetime.now(UTC).isoformat(timespec="seconds"),
        "installer_version": __version__,
    }


def write_install_record(destination: Path, record: JsonObject) -> Path:
    """Write *record* into *destination* and return the record path.

    The payload is serialized before anything touches the disk, then written
    to a sibling temp file and renamed over the record, so readers never see
    a half-written record.
    """
    text = json.dumps(record, indent=2, sort_keys=True) + "\n"
    path = destination / INSTALL_RECORD_FILENAME

    fd, temp_name = tempfile.mkstemp(dir=destination, prefix=RECORD_TEMP_PREFIX, suffix=RECORD_TEMP_SUFFIX)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_name, path)
    except OSError:
        with suppress(FileNotFoundError):
            os.unlink(temp_name)
        raise
    return path


def read_install_record(destination: Path) -> JsonObject | None:
    """Return the install record of an installed bundle, or ``None`` if absent or unreadable."""
    path = destination / INSTALL_RECORD_FILENAME
    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable install record %s: %s", path, exc)
        return None
    if not isinstance(payload, dict):
        logger.warning("Ignoring malformed install record %s", path)
        return None
    return payload
