# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI smoke tests.

CLI tests verify that:
  - commands execute
  - exit codes are correct
  - help text exists

We use subprocess to test the actual CLI entrypoint the way a user would.
This catches issues that unit tests miss, like broken imports or entrypoint
registration.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest


def _run_cli(*args: str, timeout: int = 10) -> subprocess.CompletedProcess[str]:
    """Run `lazybind` with the given arguments and capture output."""
    return subprocess.run(
        [sys.executable, "-m", "lazybind.cli.main", *args],
        capture_output=True,
        text=True,
        timeout=timeout,
    )


def _log_records(stdout: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in stdout.splitlines() if line.startswith("{")]


class TestHelpTexts:
    """Every subcommand must have working --help output."""

    @pytest.mark.parametrize("subcommand", ["run", "tokens", "info"])
    def test_subcommand_help_exits_zero(self, subcommand: str) -> None:
        result = _run_cli(subcommand, "--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_run_help_lists_overrides(self) -> None:
        result = _run_cli("run", "--help")
        for option in ("--engine", "--iterations", "--repeats", "--strategy", "--no-source-cache"):
            assert option in result.stdout

    def test_root_help_exits_with_user_error(self) -> None:
        """Running lazybind with no args should show help and exit with USER_ERROR (1)."""
        result = _run_cli()
        assert result.returncode == 1


class TestSubcommandExecution:
    def test_info_runs_without_config(self) -> None:
        result = _run_cli("info")
        assert result.returncode == 0
        (record,) = [r for r in _log_records(result.stdout) if r["msg"] == "System information"]
        assert record["engines"] == ["js2py", "mini_racer"]
        assert record["strategies"] == ["bind_all", "bind_referenced", "bind_referenced_inefficient"]
        assert set(record["engine_versions"]) == {"js2py", "mini_racer"}

    def test_tokens_reports_bound_variables(self) -> None:
        result = _run_cli("tokens", "V58 + ' ' + V59 === 'v58 v59'")
        assert result.returncode == 0
        (record,) = [r for r in _log_records(result.stdout) if r["msg"] == "Snippet tokens"]
        assert record["bound"] == ["V58", "V59"]

    def test_tokens_of_unspaced_snippet_binds_nothing(self) -> None:
        result = _run_cli("tokens", "(V1+V2)")
        (record,) = [r for r in _log_records(result.stdout) if r["msg"] == "Snippet tokens"]
        assert record["bound"] == []

    def test_run_dry_run_evaluates_nothing(self) -> None:
        result = _run_cli("run", "--dry-run", "--iterations", "1")
        assert result.returncode == 0
        messages = [r["msg"] for r in _log_records(result.stdout)]
        assert "Starting benchmark" in messages
        assert "Run complete" not in messages


class TestRunValidation:
    def test_unknown_strategy_returns_validation_error(self) -> None:
        result = _run_cli("run", "--dry-run", "--strategy", "bind_nothing")
        assert result.returncode == 4  # VALIDATION_ERROR

    def test_unknown_engine_returns_validation_error(self) -> None:
        result = _run_cli("run", "--dry-run", "--engine", "rhino")
        assert result.returncode == 4  # VALIDATION_ERROR

    def test_zero_iterations_returns_config_error(self) -> None:
        result = _run_cli("run", "--dry-run", "--iterations", "0")
        assert result.returncode == 2  # CONFIG_ERROR


class TestConfigLoading:
    def test_nonexistent_config_returns_config_error(self) -> None:
        result = _run_cli("run", "--config", "/nonexistent/path.yaml")
        assert result.returncode == 2  # CONFIG_ERROR

    def test_invalid_config_returns_config_error(self, invalid_config_file: Path) -> None:
        result = _run_cli("tokens", "V1", "--config", str(invalid_config_file))
        assert result.returncode == 2  # CONFIG_ERROR

    def test_valid_config_is_accepted(self, tmp_config_file: Path) -> None:
        result = _run_cli("run", "--dry-run", "--config", str(tmp_config_file))
        assert result.returncode == 0


class TestRunWithEngine:
    def test_run_writes_report(self, bench_config_file: Path, tmp_path: Path) -> None:
        pytest.importorskip("py_mini_racer")
        out = tmp_path / "out"
        result = _run_cli(
            "run", "--config", str(bench_config_file), "--output-dir", str(out),
            timeout=120,
        )
        assert result.returncode == 0, result.stdout + result.stderr

        payload = json.loads((out / "results.json").read_text(encoding="utf-8"))
        assert payload["engine"] == "mini_racer"
        assert [run["strategy"] for run in payload["runs"]] == ["bind_all", "bind_referenced"]
        assert all(run["error"] is None and run["mismatch_count"] == 0 for run in payload["runs"])
        assert (out / "report.txt").exists()
        assert (out / "config_snapshot.yaml").exists()


class TestGlobalOptions:
    def test_log_level_option_is_accepted(self) -> None:
        result = _run_cli("info", "--log-level", "DEBUG")
        assert result.returncode == 0

    def test_dry_run_option_is_accepted(self) -> None:
        result = _run_cli("info", "--dry-run")
        assert result.returncode == 0
