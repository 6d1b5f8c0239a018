# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for lazybind.

This is the single root command; every operation is a subcommand of
`lazybind`. The global options (--config, --log-level, --dry-run) are
inherited by every subcommand through argparse's parent parser mechanism.

Usage:
    lazybind <subcommand> [options]
    lazybind run --engine mini_racer --iterations 1000
    lazybind run --config configs/bench.yaml --strategy bind_referenced
    lazybind tokens "( V1 + V2 )"
    lazybind info
"""

import argparse
import sys

from lazybind.cli.commands import handle_info, handle_run, handle_tokens
from lazybind.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    It is created with add_help=False so its help doesn't collide with the
    subcommand parsers that inherit from it.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level.",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Resolve and log the settings without running anything.",
    )
    return parent


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    """Options of `lazybind run`. Each one overrides the matching config value."""
    parser.add_argument(
        "--engine",
        type=str,
        default=None,
        help="Engine to benchmark (mini_racer, js2py).",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Passes over the snippet corpus per timed run.",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=None,
        help="How many times to repeat the whole strategy comparison.",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        default=None,
        dest="strategies",
        help="Binding strategy to include; repeat the flag for several.",
    )
    parser.add_argument(
        "--no-source-cache",
        action="store_true",
        default=False,
        dest="no_source_cache",
        help="Prepare a new source object for every evaluation.",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        dest="output_dir",
        help="Write results.json, report.txt and config_snapshot.yaml here.",
    )


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """Register all subcommands with their handler functions."""
    run_parser = subparsers.add_parser(
        "run", parents=[parent], help="Run the binding strategy comparison.",
    )
    _add_run_arguments(run_parser)
    run_parser.set_defaults(func=handle_run)

    tokens_parser = subparsers.add_parser(
        "tokens", parents=[parent], help="Show what the lazy strategies would bind for a snippet.",
    )
    tokens_parser.add_argument("snippet", type=str, help="Snippet source text.")
    tokens_parser.set_defaults(func=handle_tokens)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display environment, engines and strategies.",
    )
    info_parser.set_defaults(func=handle_info)


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="lazybind",
        description="lazybind: binding overhead benchmark for embedded JavaScript engines.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
