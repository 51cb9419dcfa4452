"""Command-line interface for the hello-world mock data."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Sequence

from .config import (
    FORMAT_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    OUTPUT_FORMATS,
    resolve_log_level,
    resolve_output_format,
)
from .integrity import FixtureIntegrityError, validate_fixture

logger = logging.getLogger("hello_world.main")

_KNOWN_COMMANDS = ("show", "check")


def _add_log_level(parser: argparse.ArgumentParser, default: object) -> None:
    parser.add_argument(
        "--log-level",
        default=default,
        help=f"Logging level (defaults to {LOG_LEVEL_ENV_VAR} or INFO)",
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Subcommands must not reset a --log-level given before them.
    common = argparse.ArgumentParser(add_help=False)
    _add_log_level(common, argparse.SUPPRESS)

    parser = argparse.ArgumentParser(description="hello-world mock data utilities")
    _add_log_level(parser, None)
    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="show")

    show_parser = subparsers.add_parser(
        "show", parents=[common], help="Print the exported users and profiles"
    )
    show_parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help=f"Output format (defaults to {FORMAT_ENV_VAR} or json)",
    )

    subparsers.add_parser(
        "check", parents=[common], help="Verify the integrity of the mock records"
    )

    args_list = list(argv) if argv is not None else sys.argv[1:]

    if not args_list:
        args_list = ["show"]
    else:
        first = args_list[0]
        if first in ("-h", "--help"):
            return parser.parse_args(args_list)
        if not any(arg in _KNOWN_COMMANDS for arg in args_list):
            if any(flag in args_list for flag in ("-h", "--help")):
                return parser.parse_args(args_list)
            args_list = ["show", *args_list]

    return parser.parse_args(args_list)


def _show(output_format: str | None) -> int:
    try:
        fmt = resolve_output_format(output_format or os.getenv(FORMAT_ENV_VAR))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        from .formatting import render_fixture

        text = render_fixture(fmt)
    except FixtureIntegrityError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(text)
    return 0


def _check() -> int:
    try:
        from .mock import PROFILES, USERS

        validate_fixture(PROFILES, USERS)
    except FixtureIntegrityError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Mock data is consistent: %d profiles, %d users", len(PROFILES), len(USERS))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    args = _parse_args(argv)

    try:
        level = resolve_log_level(args.log_level or os.getenv(LOG_LEVEL_ENV_VAR))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")

    if args.command == "check":
        return _check()
    return _show(args.output_format)


__all__ = ["main"]
