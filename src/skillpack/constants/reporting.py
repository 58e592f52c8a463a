"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

STATUS_COLORS: dict[str, str] = {
    "installed": ANSI_GREEN,
    "replaced": ANSI_GREEN,
    "unchanged": ANSI_DIM,
    "valid": ANSI_GREEN,
    "invalid": ANSI_RED,
    "conflict": ANSI_YELLOW,
    "io_error": ANSI_RED,
}
