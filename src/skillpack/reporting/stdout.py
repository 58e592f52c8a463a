"""Stdout reporter for install and validate runs."""

from __future__ import annotations

from collections.abc import Sequence

from skillpack.constants.branding import ASCII_LOGO_LINES, RUN_SUMMARY_TITLES
from skillpack.constants.reporting import ANSI_RESET, STATUS_COLORS
from skillpack.model import BundleOutcome, InstalledBundle, RunResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats run results as human-readable stdout output."""

    def __init__(self, result: RunResult, *, color: bool = True, verbose: bool = False) -> None:
        self.result = result
        self.color = color
        self.verbose = verbose

    def render(self) -> str:
        lines: list[str] = []
        if self.verbose:
            lines.extend(ASCII_LOGO_LINES)
            lines.append("")
        lines.append(f"Source: {self.result.source}")
        for target in self.result.targets:
            lines.append(f"Target ({target.scope}): {target.root}")
        if self.result.dry_run and self.result.targets:
            lines.append("Dry run: nothing was copied.")
        lines.append("")

        if not self.result.outcomes:
            lines.append("No skill bundles found.")
            return "\n".join(lines)

        for outcome in self.result.outcomes:
            lines.extend(self._render_outcome(outcome))

        lines.append("")
        lines.append(self._render_summary())
        return "\n".join(lines)

    def _render_outcome(self, outcome: BundleOutcome) -> list[str]:
        label = outcome.name or outcome.path.name
        lines = [f"  {self._status(outcome.status):<12} {label}  ({outcome.path})"]
        for error in outcome.errors:
            lines.append(f"      {error.format()}")
        if outcome.message and not outcome.errors:
            lines.append(f"      {outcome.message}")
        if self.verbose:
            for destination in outcome.destinations:
                lines.append(f"      -> {destination}")
        return lines

    def _render_summary(self) -> str:
        counts = self.result.status_counts()
        parts = [f"{status}={counts[status]}" for status in sorted(counts)]
        title = RUN_SUMMARY_TITLES[self.result.kind]
        return f"{title}: {len(self.result.outcomes)} bundle(s); " + ", ".join(parts)

    def _status(self, status: str) -> str:
        color = STATUS_COLORS.get(status, "")
        if self.color and color:
            return _colorize(status, color)
        return status


def render_installed(bundles: Sequence[InstalledBundle]) -> str:
    """Render installed bundles one per line."""
    if not bundles:
        return "No skill bundles installed."
    lines = []
    for bundle in bundles:
        line = bundle.name
        if bundle.description:
            line = f"{line}: {bundle.description}"
        lines.append(line)
    return "\n".join(lines)
