# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Sweep report writer.

When an output directory is configured, a sweep leaves three files behind:

    <output_dir>/
    ├── results.json          every RunResult plus the per-strategy summary
    ├── report.txt            human-readable comparison
    └── config_snapshot.yaml  the effective config of the sweep

results.json is the authoritative output; report.txt is a convenience view of
the same numbers.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from statistics import fmean

import yaml

from lazybind.bench.models import StrategySummary, SweepReport
from lazybind.logging.logger import get_logger

logger = get_logger(__name__)


def summarize(report: SweepReport) -> list[StrategySummary]:
    """
    Aggregate a sweep per strategy, in the sweep's strategy order.

    Best and mean are taken over completed runs only; a strategy whose runs
    all aborted reports 0.0 for both.
    """
    summaries: list[StrategySummary] = []
    for strategy in report.strategies:
        results = report.results_for(strategy)
        completed = [result.elapsed_seconds for result in results if result.completed]
        summaries.append(StrategySummary(
            strategy=strategy,
            runs=len(results),
            failed_runs=len(results) - len(completed),
            best_elapsed_seconds=min(completed) if completed else 0.0,
            mean_elapsed_seconds=fmean(completed) if completed else 0.0,
            mismatch_count=sum(result.mismatch_count for result in results),
        ))
    return summaries


def write_report(
    report: SweepReport,
    output_dir: Path,
    config_snapshot: dict[str, object] | None = None,
) -> Path:
    """
    Write the sweep report to disk and return the output directory.

    The directory is created if needed.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    results_path = output_dir / "results.json"
    payload = {
        "engine": report.engine,
        "iterations": report.iterations,
        "repeats": report.repeats,
        "variable_space_size": report.variable_space_size,
        "snippet_count": report.snippet_count,
        "strategies": report.strategies,
        "summary": [asdict(summary) for summary in summarize(report)],
        "runs": [asdict(result) for result in report.results],
    }
    results_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, default=str),
        encoding="utf-8",
    )

    report_path = output_dir / "report.txt"
    report_path.write_text(format_report_text(report), encoding="utf-8")

    if config_snapshot is not None:
        config_path = output_dir / "config_snapshot.yaml"
        config_path.write_text(
            yaml.dump(config_snapshot, default_flow_style=False, sort_keys=True),
            encoding="utf-8",
        )

    logger.info(
        "Sweep report written",
        extra={"output_dir": str(output_dir)},
    )

    return output_dir


def format_report_text(report: SweepReport) -> str:
    """Format a sweep into a plain-text comparison table."""
    timestamp = datetime.now(tz=timezone.utc).isoformat()
    lines: list[str] = [
        "=" * 60,
        "LAZYBIND BINDING BENCHMARK",
        f"Generated: {timestamp}",
        f"Engine: {report.engine}",
        "=" * 60,
        "",
        "--- PARAMETERS ---",
        f"Iterations per run: {report.iterations}",
        f"Repeats: {report.repeats}",
        f"Snippets: {report.snippet_count}",
        f"Variables: {report.variable_space_size}",
        "",
        "--- STRATEGIES ---",
    ]

    width = max((len(name) for name in report.strategies), default=0)
    for summary in summarize(report):
        line = (
            f"{summary.strategy.rjust(width)}: "
            f"best {summary.best_elapsed_seconds:.3f}s  "
            f"mean {summary.mean_elapsed_seconds:.3f}s  "
            f"runs {summary.runs}"
        )
        if summary.failed_runs:
            line += f"  aborted {summary.failed_runs}"
        if summary.mismatch_count:
            line += f"  mismatches {summary.mismatch_count}"
        lines.append(line)

    errors = [result for result in report.results if not result.completed]
    if errors:
        lines.extend(["", "--- ABORTED RUNS ---"])
        for result in errors:
            lines.append(f"  {result.strategy} (repeat {result.repeat_index + 1}): {result.error}")

    lines.extend(["", "=" * 60])
    return "\n".join(lines) + "\n"
