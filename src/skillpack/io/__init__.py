"""Shared file I/O helpers."""

from .files import directory_sha256, file_sha256

__all__ = ["directory_sha256", "file_sha256"]
