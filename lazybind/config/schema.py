# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for lazybind.

Each config section is a frozen pydantic model. The models use pydantic v2's
ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

A benchmark sweep reads its settings once at startup and never touches them
again, so there is nothing to gain from mutable config and a typo in a YAML
key should stop the run rather than silently fall back to a default.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GlobalConfig(BaseModel):
    """Cross-cutting settings: project identity and log output."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="lazybind", description="Human-readable project identifier"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )


class EngineConfig(BaseModel):
    """
    Which script engine to benchmark and how to set it up.

    `v8_flags` is process-wide engine tuning: it only applies to the
    mini_racer engine and is handed to V8 once, before the first context
    is created.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    name: str = Field(
        default="mini_racer",
        description="Registered engine name: 'mini_racer' or 'js2py'",
    )
    cache_sources: bool = Field(
        default=True,
        description="Memoize prepared snippet sources across evaluations",
    )
    v8_flags: list[str] = Field(
        default_factory=list,
        description="Extra V8 flags, e.g. ['--jitless'] to force interpreted mode",
    )


class BenchConfig(BaseModel):
    """
    Everything a benchmark sweep needs.

    The defaults reproduce the reference comparison: 5000 passes over the
    built-in corpus, the whole sweep repeated 5 times, all three binding
    strategies, a 100-entry variable space.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(default="1.0.0", description="Schema version")
    iterations: int = Field(
        default=5000,
        ge=1,
        description="Passes over the snippet corpus per timed run",
    )
    repeats: int = Field(
        default=5,
        ge=1,
        description="How many times the whole strategy comparison is repeated",
    )
    variable_space_size: int = Field(
        default=100,
        ge=0,
        description="Number of generated variables (half ints, half strings)",
    )
    strategies: list[str] = Field(
        default_factory=lambda: [
            "bind_all",
            "bind_referenced",
            "bind_referenced_inefficient",
        ],
        min_length=1,
        description="Binding strategies to compare, in run order",
    )
    snippets: Optional[list[str]] = Field(
        default=None,
        description="Snippet corpus override; None uses the built-in corpus",
    )
    output_directory: Optional[str] = Field(
        default=None,
        description="Where to write results.json/report.txt; None writes nothing",
    )
    engine: EngineConfig = Field(default_factory=EngineConfig)


class LazyBindConfig(BaseModel):
    """
    Top-level config container.

    A YAML file must have a `global:` section. The `bench:` section is
    optional; commands fall back to BenchConfig defaults when it is absent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    bench: Optional[BenchConfig] = Field(default=None)
