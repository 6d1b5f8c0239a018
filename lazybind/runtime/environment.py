# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
What the benchmark ran on.

Binding timings from two machines, two interpreters or two engine releases
can't be compared, so everything that changes them is collected here: the
interpreter, the platform, the resolution of the clock the runner reads and
the installed engine library versions. All of it goes into the bootstrap log
line and into `lazybind info`.
"""

import os
import platform
import sys
import time
from importlib import metadata
from typing import NamedTuple, Optional

MINIMUM_PYTHON_MAJOR = 3
MINIMUM_PYTHON_MINOR = 11

# Engine name as registered -> distribution name on the package index.
ENGINE_DISTRIBUTIONS: dict[str, str] = {
    "mini_racer": "mini-racer",
    "js2py": "Js2Py",
}


class SystemInfo(NamedTuple):
    """Snapshot of the machine and interpreter a sweep runs on."""

    python_version: str
    python_implementation: str
    platform: str
    architecture: str
    hostname: str
    cpu_count: Optional[int]
    timer_resolution: float


def get_python_version() -> tuple[int, int, int]:
    return sys.version_info[:3]


def check_minimum_python() -> None:
    """
    Refuse to run on an interpreter older than 3.11.

    Raises:
        RuntimeError: If the running Python is too old.
    """
    major, minor, _ = get_python_version()
    if (major, minor) < (MINIMUM_PYTHON_MAJOR, MINIMUM_PYTHON_MINOR):
        raise RuntimeError(
            f"lazybind requires Python >= {MINIMUM_PYTHON_MAJOR}.{MINIMUM_PYTHON_MINOR}, "
            f"but you're running {major}.{minor}. Please upgrade."
        )


def get_system_info() -> SystemInfo:
    return SystemInfo(
        python_version=platform.python_version(),
        python_implementation=platform.python_implementation(),
        platform=platform.system(),
        architecture=platform.machine(),
        hostname=platform.node(),
        cpu_count=os.cpu_count(),
        # The runner times with perf_counter; anything faster than this is noise.
        timer_resolution=time.get_clock_info("perf_counter").resolution,
    )


def get_engine_versions() -> dict[str, Optional[str]]:
    """
    Installed version of each engine library, None where it isn't installed.

    Only distribution metadata is read. The engines themselves are not
    imported, so this is safe to call even when an engine is broken on the
    running interpreter.
    """
    versions: dict[str, Optional[str]] = {}
    for engine, distribution in ENGINE_DISTRIBUTIONS.items():
        try:
            versions[engine] = metadata.version(distribution)
        except metadata.PackageNotFoundError:
            versions[engine] = None
    return versions
