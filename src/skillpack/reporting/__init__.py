"""Human-readable reporting for run results."""

from .stdout import StdoutReporter, render_installed

__all__ = ["StdoutReporter", "render_installed"]
