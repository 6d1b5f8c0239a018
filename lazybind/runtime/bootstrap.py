# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for lazybind.

The bootstrap sequence is:
  1. Validate the environment (Python version)
  2. Initialize the runtime logger from the global config
  3. Log what we're running on

Engine setup (V8 flags and the like) is deliberately not done here. It
belongs to the evaluator factory that owns the engine and is passed to its
constructor explicitly.
"""

from pathlib import Path

from lazybind.config.schema import GlobalConfig
from lazybind.logging.logger import get_logger
from lazybind.runtime.environment import check_minimum_python, get_engine_versions, get_system_info


def bootstrap(config: GlobalConfig) -> None:
    """
    Run the bootstrap sequence. Called once at the start of every CLI command
    that was given a config file.

    Args:
        config: The validated global configuration.
    """
    check_minimum_python()

    log_file = None
    if config.log_file is not None:
        log_file = Path(config.log_file)

    logger = get_logger("lazybind.runtime", log_level=config.log_level, log_file=log_file)

    system_info = get_system_info()
    logger.info(
        "lazybind bootstrap complete",
        extra={
            "project_name": config.project_name,
            "python_version": system_info.python_version,
            "python_implementation": system_info.python_implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "cpu_count": system_info.cpu_count,
            "timer_resolution": system_info.timer_resolution,
            "engine_versions": get_engine_versions(),
        },
    )
