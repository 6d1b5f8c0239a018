# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: YAML file in, frozen LazyBindConfig out.

Steps, in order:
  1. read and parse the YAML mapping
  2. normalize the optional `bench:` section (a bare `bench:` key means
     "benchmark with the defaults")
  3. schema validation through pydantic
  4. cross-field checks on the bench section that a per-field schema can't
     express

Every failure is a ConfigError subclass and nothing is retried. A sweep run
on half-applied settings produces numbers that can't be compared with
anything.
"""

from collections import Counter
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lazybind.config.exceptions import ConfigLoadError, ConfigValidationError
from lazybind.config.schema import BenchConfig, LazyBindConfig
from lazybind.logging.logger import get_logger

logger = get_logger(__name__)


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Parse a YAML file that must contain a top-level mapping.

    Raises:
        ConfigLoadError: Missing path, a directory, unreadable file, bad YAML,
            or a document that isn't a mapping.
    """
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    if not config_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}"
        )

    return parsed


def _normalize_sections(raw_data: dict[str, Any]) -> dict[str, Any]:
    # `bench:` with nothing under it parses as None; treat it as an empty section.
    if "bench" in raw_data and raw_data["bench"] is None:
        return {**raw_data, "bench": {}}
    return raw_data


def _check_bench_section(bench: BenchConfig, config_path: Path) -> None:
    """
    Reject bench settings that validate field by field but make a useless sweep.

    Raises:
        ConfigValidationError: A strategy listed twice, an empty snippet corpus,
            or a blank snippet.
    """
    repeated = sorted(name for name, count in Counter(bench.strategies).items() if count > 1)
    if repeated:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}: "
            f"strategies listed more than once: {repeated}"
        )

    if bench.snippets is None:
        return

    if not bench.snippets:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}: "
            "bench.snippets is empty; omit it to use the built-in corpus"
        )

    blank = [index for index, snippet in enumerate(bench.snippets) if not snippet.strip()]
    if blank:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}: "
            f"blank snippets at positions {blank}"
        )


def load_config(config_path: Path) -> LazyBindConfig:
    """
    Load, validate, and freeze a config file into a LazyBindConfig object.

    Args:
        config_path: Path to a YAML config file.

    Returns:
        A fully validated, frozen LazyBindConfig instance. `bench` is None only
        when the file has no `bench:` key at all.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types,
            unknown keys) and inconsistent bench settings.
    """
    raw_data = _normalize_sections(_read_yaml_file(config_path))

    try:
        config = LazyBindConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}"
        ) from err

    if config.bench is not None:
        _check_bench_section(config.bench, config_path)

    logger.debug(
        "Config loaded",
        extra={
            "config_path": str(config_path),
            "project_name": config.global_config.project_name,
            "has_bench_section": config.bench is not None,
        },
    )
    return config
