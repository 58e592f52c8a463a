"""Constants for bundle installation and install records."""

from __future__ import annotations

INSTALL_RECORD_FILENAME: str = ".skillpack.json"
INSTALL_RECORD_SCHEMA_VERSION: str = "1.0.0"
RECORD_TEMP_PREFIX: str = ".tmp-"
RECORD_TEMP_SUFFIX: str = ".json"
DIGEST_CHUNK_SIZE: int = 65536
