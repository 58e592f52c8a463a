"""CLI entrypoint for Skillpack."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillpack import __version__
from skillpack.cli.handlers import (
    handle_install,
    handle_installed,
    handle_list,
    handle_uninstall,
    handle_validate,
    handle_validate_config,
)
from skillpack.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillpack",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List skill bundles found in a source")
    _add_source_args(list_cmd)
    _add_project_args(list_cmd)

    validate = subparsers.add_parser("validate", help="Validate the frontmatter of every bundle in a source")
    _add_source_args(validate)
    _add_project_args(validate)
    _add_output_args(validate)

    install = subparsers.add_parser("install", help="Validate and install skill bundles from a source")
    _add_source_args(install)
    _add_project_args(install)
    _add_target_args(install)
    install.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an installed bundle of the same name with different content",
    )
    install.add_argument("-n", "--dry-run", action="store_true", help="Validate and report without copying")
    _add_output_args(install)

    installed = subparsers.add_parser("installed", help="List bundles installed in a target")
    _add_project_args(installed)
    _add_target_args(installed, repeatable=False)

    uninstall = subparsers.add_parser("uninstall", help="Remove an installed bundle")
    uninstall.add_argument("name", help="Installed bundle name")
    _add_project_args(uninstall)
    _add_target_args(uninstall, repeatable=False)

    validate_config = subparsers.add_parser("validate-config", help="Validate configuration without installing")
    _add_project_args(validate_config)

    return parser


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="Local directory, git URL or owner/repo[/path] shorthand")
    parser.add_argument("--ref", default=None, help="Branch or tag to check out for git sources")


def _add_project_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: cwd)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and destinations")


def _add_target_args(parser: argparse.ArgumentParser, *, repeatable: bool = True) -> None:
    parser.add_argument(
        "-g",
        "--global",
        dest="global_install",
        action="store_true",
        help="Use the global install root instead of the project-local one",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=Path,
        action="append" if repeatable else "store",
        default=None,
        help="Explicit install root" + (" (repeat for multiple targets)" if repeatable else ""),
    )


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--no-stdout", action="store_true", help="Silence the per-bundle report")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    handlers = {
        "list": handle_list,
        "validate": handle_validate,
        "install": handle_install,
        "installed": handle_installed,
        "uninstall": handle_uninstall,
        "validate-config": handle_validate_config,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
