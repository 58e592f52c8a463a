"""CLI subcommand handlers.

Exit codes: 0 success, 1 when any bundle failed or an I/O error occurred,
2 for configuration, source or validation errors reported before any work.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from skillpack.config import SkillpackConfig, load_config, preflight_validate
from skillpack.exceptions import (
    BundleIOError,
    BundleNotInstalledError,
    BundleValidationError,
    ConfigError,
    SkillpackError,
    SourceError,
)
from skillpack.exceptions.validation import format_errors
from skillpack.installer import list_installed, resolve_install_targets, uninstall_bundle
from skillpack.model import InstallTarget, RunResult
from skillpack.pipeline import run_install, run_validate
from skillpack.reporting import StdoutReporter, render_installed
from skillpack.scanner import discover_bundles, open_source


def handle_list(args: argparse.Namespace) -> int:
    """Print the directory of every bundle candidate in a source."""
    config = _load_config_or_none(args)
    if config is None:
        return 2
    try:
        with open_source(args.source, ref_name=args.ref) as root:
            candidates = discover_bundles(
                root,
                max_depth=config.max_depth,
                max_file_mb=config.max_file_mb,
                exclude_dirs=config.exclude_dirs,
            )
            for candidate in candidates:
                print(candidate.path)
    except SourceError as exc:
        print(f"Source error: {exc}", file=sys.stderr)
        return 2
    except BundleIOError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1
    return 0


def handle_validate(args: argparse.Namespace) -> int:
    """Validate every bundle in a source; exit 2 if any violates a constraint."""
    config = _load_config_or_none(args)
    if config is None:
        return 2
    try:
        result = run_validate(args.source, config, ref_name=args.ref)
    except SourceError as exc:
        print(f"Source error: {exc}", file=sys.stderr)
        return 2
    except BundleIOError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1

    errors = [error for outcome in result.outcomes for error in outcome.errors]
    if errors:
        print(format_errors(errors), file=sys.stderr)
    _print_report(args, result)
    return 2 if errors else 0


def handle_install(args: argparse.Namespace) -> int:
    """Run scan, validation and installation for a source."""
    config = _load_config_or_none(args)
    if config is None:
        return 2
    targets = resolve_install_targets(
        config,
        global_install=args.global_install,
        explicit=tuple(args.target or ()),
    )
    try:
        result = run_install(
            args.source,
            config,
            targets=targets,
            overwrite=args.overwrite,
            dry_run=args.dry_run,
            ref_name=args.ref,
        )
    except SourceError as exc:
        print(f"Source error: {exc}", file=sys.stderr)
        return 2
    except SkillpackError as exc:
        print(f"Install error: {exc}", file=sys.stderr)
        return 1

    _print_report(args, result)
    return result.exit_code


def handle_installed(args: argparse.Namespace) -> int:
    """List bundles installed in the resolved target."""
    config = _load_config_or_none(args)
    if config is None:
        return 2
    target = _single_target(args, config)
    try:
        bundles = list_installed(target)
    except BundleIOError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1
    print(render_installed(bundles))
    return 0


def handle_uninstall(args: argparse.Namespace) -> int:
    """Remove an installed bundle from the resolved target."""
    config = _load_config_or_none(args)
    if config is None:
        return 2
    target = _single_target(args, config)
    try:
        removed = uninstall_bundle(args.name, target)
    except BundleValidationError as exc:
        print(format_errors(exc.errors), file=sys.stderr)
        return 2
    except BundleNotInstalledError as exc:
        print(f"Uninstall error: {exc}", file=sys.stderr)
        return 1
    except BundleIOError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1
    print(f"Removed {removed}")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _load_config_or_none(args: argparse.Namespace) -> SkillpackConfig | None:
    """Preflight-validate and load config, printing errors to stderr on failure."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None
    try:
        return load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None


def _single_target(args: argparse.Namespace, config: SkillpackConfig) -> InstallTarget:
    explicit: tuple[Path, ...] = (args.target,) if args.target is not None else ()
    return resolve_install_targets(config, global_install=args.global_install, explicit=explicit)[0]


def _print_report(args: argparse.Namespace, result: RunResult) -> None:
    if args.no_stdout:
        return
    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(result, color=use_color, verbose=args.verbose)
    print(reporter.render())
