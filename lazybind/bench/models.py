# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for benchmark results.

A RunResult is one timed run: one engine, one strategy, N passes over the
corpus. A SweepReport is every RunResult of a sweep plus the parameters that
produced them. RunResults are frozen; the report is appended to while the
sweep runs and left alone afterwards.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RunResult:
    """
    The outcome of one timed run.

    `elapsed_seconds` covers the whole nested loop. If the run was cut short
    by an exception, `error` says why and `elapsed_seconds` is the time up to
    that point, with `evaluations` telling how far it got.
    """

    engine: str
    strategy: str
    repeat_index: int
    iterations: int
    evaluations: int
    elapsed_seconds: float
    mismatch_count: int = 0
    mismatches: tuple[str, ...] = ()
    error: str | None = None

    @property
    def completed(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StrategySummary:
    """Per-strategy aggregate over every repeat of a sweep."""

    strategy: str
    runs: int
    failed_runs: int
    best_elapsed_seconds: float
    mean_elapsed_seconds: float
    mismatch_count: int


@dataclass
class SweepReport:
    """Everything a sweep produced, in run order."""

    engine: str
    iterations: int
    repeats: int
    variable_space_size: int
    snippet_count: int
    strategies: list[str]
    results: list[RunResult] = field(default_factory=list)

    def results_for(self, strategy: str) -> list[RunResult]:
        return [result for result in self.results if result.strategy == strategy]
