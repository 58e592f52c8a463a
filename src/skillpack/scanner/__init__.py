"""Bundle discovery package."""

from __future__ import annotations

from .discovery import discover_bundles, iter_bundle_candidates
from .sources import SourceRef, open_source, parse_source

__all__ = ["SourceRef", "discover_bundles", "iter_bundle_candidates", "open_source", "parse_source"]
