# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the lazybind CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. No print() calls: the timings, the summary and every error go through
the structured logger.
"""

import argparse
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lazybind.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, VALIDATION_ERROR
from lazybind.config.exceptions import ConfigError, ConfigValidationError
from lazybind.config.loader import load_config
from lazybind.config.schema import BenchConfig, LazyBindConfig
from lazybind.logging.logger import get_logger
from lazybind.runtime.bootstrap import bootstrap


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, LazyBindConfig | None, logging.Logger]:
    """
    The shared setup every command needs: load config, run bootstrap.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately.
    """
    logger = get_logger(f"lazybind.cli.{command_name}", log_level=args.log_level)

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    if config is not None:
        bootstrap(config.global_config)
    else:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _resolve_bench_config(args: argparse.Namespace, config: LazyBindConfig | None) -> BenchConfig:
    """
    Merge command-line overrides on top of the config file's bench section.

    The merged dict goes back through validation, so `--iterations 0` fails
    the same way `iterations: 0` in YAML would.

    Raises:
        ConfigValidationError: If the merged settings don't validate.
    """
    base = config.bench if config is not None and config.bench is not None else BenchConfig()
    data: dict[str, Any] = base.model_dump()

    if args.iterations is not None:
        data["iterations"] = args.iterations
    if args.repeats is not None:
        data["repeats"] = args.repeats
    if args.strategies:
        data["strategies"] = args.strategies
    if args.output_dir is not None:
        data["output_directory"] = args.output_dir
    if args.engine is not None:
        data["engine"]["name"] = args.engine
    if args.no_source_cache:
        data["engine"]["cache_sources"] = False

    try:
        return BenchConfig.model_validate(data)
    except ValidationError as err:
        raise ConfigValidationError(f"Invalid benchmark settings:\n{err}") from err


def handle_run(args: argparse.Namespace) -> int:
    """
    Run the binding strategy comparison.

    Builds the variable space and the evaluator factory once, runs the sweep,
    logs a summary line per strategy and optionally writes the report files.
    """
    exit_code, config, logger = _load_and_bootstrap(args, "run")
    if exit_code != SUCCESS:
        return exit_code

    from lazybind.bench.evaluators.registry import create_factory, list_engines
    from lazybind.bench.reporting.writer import summarize, write_report
    from lazybind.bench.runner import BenchmarkRunner
    from lazybind.bench.snippets import DEFAULT_SNIPPETS
    from lazybind.bench.strategies import get_strategy
    from lazybind.bench.variables import generate

    try:
        bench = _resolve_bench_config(args, config)
    except ConfigError as err:
        logger.error("Configuration error", extra={"command": "run", "error": str(err)})
        return CONFIG_ERROR

    if bench.engine.name not in list_engines():
        logger.error(
            "Unknown engine",
            extra={"engine": bench.engine.name, "available": list_engines()},
        )
        return VALIDATION_ERROR

    try:
        strategies = [get_strategy(name) for name in bench.strategies]
    except KeyError as err:
        logger.error("Unknown binding strategy", extra={"error": str(err)})
        return VALIDATION_ERROR

    logger.info(
        "Starting benchmark",
        extra={
            "command": "run",
            "dry_run": args.dry_run,
            "engine": bench.engine.name,
            "iterations": bench.iterations,
            "repeats": bench.repeats,
            "strategies": bench.strategies,
            "cache_sources": bench.engine.cache_sources,
        },
    )

    if args.dry_run:
        logger.info("Dry run, nothing evaluated", extra={"command": "run"})
        return SUCCESS

    try:
        factory = create_factory(bench.engine)
    except Exception as err:
        logger.error(
            "Could not start engine",
            extra={"engine": bench.engine.name, "error": str(err)},
            exc_info=True,
        )
        return RUNTIME_ERROR

    snippets = bench.snippets if bench.snippets is not None else DEFAULT_SNIPPETS
    runner = BenchmarkRunner(generate(bench.variable_space_size), snippets)

    try:
        report = runner.run_sweep(factory, strategies, bench.iterations, bench.repeats)

        for summary in summarize(report):
            logger.info(
                "Strategy summary",
                extra={
                    "engine": report.engine,
                    "strategy": summary.strategy,
                    "best_elapsed_seconds": round(summary.best_elapsed_seconds, 6),
                    "mean_elapsed_seconds": round(summary.mean_elapsed_seconds, 6),
                    "failed_runs": summary.failed_runs,
                    "mismatches": summary.mismatch_count,
                },
            )

        if bench.output_directory is not None:
            snapshot: dict[str, object] = {"bench": bench.model_dump()}
            if config is not None:
                snapshot["global"] = config.global_config.model_dump()
            write_report(report, Path(bench.output_directory), config_snapshot=snapshot)

        return SUCCESS
    except Exception as err:
        logger.error(
            "Runtime error",
            extra={"command": "run", "error": str(err)},
            exc_info=True,
        )
        return RUNTIME_ERROR
    finally:
        factory.close()


def handle_tokens(args: argparse.Namespace) -> int:
    """
    Show the naive tokens of a snippet and which of them would be bound.

    Handy for checking a new snippet is spaced so that the lazy strategies
    actually find its variables.
    """
    exit_code, config, logger = _load_and_bootstrap(args, "tokens")
    if exit_code != SUCCESS:
        return exit_code

    from lazybind.bench.references import tokens
    from lazybind.bench.variables import DEFAULT_SIZE, generate

    size = DEFAULT_SIZE
    if config is not None and config.bench is not None:
        size = config.bench.variable_space_size
    variables = generate(size)
    found = sorted(tokens(args.snippet))

    logger.info(
        "Snippet tokens",
        extra={
            "snippet": args.snippet,
            "tokens": found,
            "bound": [token for token in found if token in variables],
        },
    )
    return SUCCESS


def handle_info(args: argparse.Namespace) -> int:
    """Display environment, registered engines and binding strategies."""
    logger = get_logger("lazybind.cli.info", log_level=args.log_level)

    from lazybind import __version__
    from lazybind.bench.evaluators.registry import list_engines
    from lazybind.bench.strategies import list_strategies
    from lazybind.runtime.environment import get_engine_versions, get_system_info

    system_info = get_system_info()

    logger.info(
        "System information",
        extra={
            "lazybind_version": __version__,
            "python_version": system_info.python_version,
            "python_implementation": system_info.python_implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "hostname": system_info.hostname,
            "cpu_count": system_info.cpu_count,
            "timer_resolution": system_info.timer_resolution,
            "engine_versions": get_engine_versions(),
            "engines": list_engines(),
            "strategies": list_strategies(),
            "config": args.config,
        },
    )
    return SUCCESS
