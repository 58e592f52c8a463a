"""Bundle installation into project-local or global targets."""

from __future__ import annotations

from .copy import bundle_digest, install_bundle, list_installed, uninstall_bundle
from .record import build_install_record, read_install_record
from .targets import resolve_install_targets

__all__ = [
    "build_install_record",
    "bundle_digest",
    "install_bundle",
    "list_installed",
    "read_install_record",
    "resolve_install_targets",
    "uninstall_bundle",
]
