"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLPACK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLPACK",
    "     // discover, validate and install agent skills",
)
RUN_SUMMARY_TITLES: dict[str, str] = {
    "install": "Install summary",
    "validate": "Validation summary",
}
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill bundle installer"))
