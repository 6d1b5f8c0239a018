# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The benchmark runner: a comparative stopwatch.

One run is `iterations` passes over the snippet corpus. For every snippet:

  1. acquire an Evaluator from the factory
  2. let the binding strategy bind variables into it
  3. evaluate the snippet
  4. check the result is exactly True (a mismatch is logged, the run goes on)
  5. release the Evaluator

The clock wraps the whole nested loop, not each snippet, so what comes out
is the end-to-end cost of acquire + bind + evaluate + release as the host
program would see it.

An EvaluationError, or anything else that escapes the loop, ends the run
early. It is logged with its traceback and recorded on the RunResult, and the
time up to that point is still reported. `run` never raises: one bad
snippet shouldn't take the rest of a sweep down with it.

There is no warm-up, no outlier rejection and no statistics beyond best and
mean. Repeating the sweep a few times and eyeballing the spread is the
intended use.
"""

import time
from collections.abc import Sequence

from lazybind.bench.evaluators.base import EvaluatorContext, EvaluatorFactory
from lazybind.bench.evaluators.sources import SourceCache
from lazybind.bench.models import RunResult, SweepReport
from lazybind.bench.snippets import DEFAULT_SNIPPETS
from lazybind.bench.strategies import BindingStrategy
from lazybind.bench.variables import VariableSpace
from lazybind.logging.logger import get_logger

logger = get_logger(__name__)


class BenchmarkRunner:
    """
    Runs a fixed snippet corpus against a fixed variable space.

    Args:
        variables: The variable space every strategy binds from.
        snippets: The corpus, evaluated in this order on every pass.
    """

    def __init__(
        self,
        variables: VariableSpace,
        snippets: Sequence[str] = DEFAULT_SNIPPETS,
    ) -> None:
        self.variables = variables
        self.snippets = tuple(snippets)

    def run(
        self,
        factory: EvaluatorFactory,
        strategy: BindingStrategy,
        iterations: int,
        repeat_index: int = 0,
    ) -> RunResult:
        """Time `iterations` passes over the corpus with one factory and one strategy."""
        evaluations = 0
        mismatch_count = 0
        mismatched: dict[str, None] = {}
        error: str | None = None

        start = time.perf_counter()
        try:
            for _ in range(iterations):
                for snippet in self.snippets:
                    with EvaluatorContext(factory) as evaluator:
                        strategy.apply(evaluator, snippet, self.variables)
                        result = evaluator.evaluate(snippet)
                        evaluations += 1
                        if result is not True:
                            mismatch_count += 1
                            mismatched[snippet] = None
                            logger.warning(
                                "Snippet was not true",
                                extra={
                                    "engine": factory.name,
                                    "strategy": strategy.name,
                                    "snippet": snippet,
                                    "result": repr(result),
                                },
                            )
        except Exception as exc:
            elapsed = time.perf_counter() - start
            error = f"{type(exc).__name__}: {exc}"
            logger.error(
                "Benchmark run aborted",
                extra={
                    "engine": factory.name,
                    "strategy": strategy.name,
                    "evaluations": evaluations,
                    "error": error,
                },
                exc_info=True,
            )
        else:
            elapsed = time.perf_counter() - start

        return RunResult(
            engine=factory.name,
            strategy=strategy.name,
            repeat_index=repeat_index,
            iterations=iterations,
            evaluations=evaluations,
            elapsed_seconds=elapsed,
            mismatch_count=mismatch_count,
            mismatches=tuple(mismatched),
            error=error,
        )

    def run_sweep(
        self,
        factory: EvaluatorFactory,
        strategies: Sequence[BindingStrategy],
        iterations: int,
        repeats: int,
    ) -> SweepReport:
        """
        Run every strategy in order, and do that `repeats` times.

        Interleaving strategies within each repeat (rather than running all
        repeats of one strategy back to back) keeps slow drift in machine load
        from landing on a single strategy.
        """
        report = SweepReport(
            engine=factory.name,
            iterations=iterations,
            repeats=repeats,
            variable_space_size=len(self.variables),
            snippet_count=len(self.snippets),
            strategies=[strategy.name for strategy in strategies],
        )

        logger.info(
            "Starting sweep",
            extra={
                "engine": factory.name,
                "iterations": iterations,
                "repeats": repeats,
                "strategies": report.strategies,
                "snippets": report.snippet_count,
                "variables": report.variable_space_size,
            },
        )

        for repeat_index in range(repeats):
            for strategy in strategies:
                result = self.run(factory, strategy, iterations, repeat_index=repeat_index)
                report.results.append(result)
                logger.info(
                    "Run complete",
                    extra={
                        "engine": result.engine,
                        "strategy": result.strategy,
                        "repeat": repeat_index + 1,
                        "elapsed_seconds": round(result.elapsed_seconds, 6),
                        "evaluations": result.evaluations,
                        "mismatches": result.mismatch_count,
                        "completed": result.completed,
                    },
                )

        sources = getattr(factory, "sources", None)
        if isinstance(sources, SourceCache):
            logger.debug(
                "Source cache stats",
                extra={"cached": len(sources), "hits": sources.hits, "misses": sources.misses},
            )

        return report
