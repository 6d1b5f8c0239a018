# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
V8 evaluators via mini-racer: the context-sharing engine.

Cost profile:
  - creating a MiniRacer context means standing up a V8 isolate, which is
    slow, so the factory builds exactly one and every Evaluator it hands out
    runs in that same context
  - binding a variable is a round trip into V8 (an eval that assigns a
    globalThis property), which is the expensive per-variable operation this
    engine is benchmarked for

Because the context is shared, release() must undo every binding made during
the acquisition, otherwise a variable bound for one snippet (or mutated by
it, like `++ V1`) would still be visible to the next one. Only the names this
evaluator bound are deleted; one delete eval per release.

NOTE: the shared context and the bound-name bookkeeping are not synchronized.
One thread drives a factory, and only one Evaluator from it may be live at a
time.
"""

import json
from collections.abc import Iterable
from typing import Any

from py_mini_racer import JSEvalException, MiniRacer

from lazybind.bench.evaluators.base import EvaluationError
from lazybind.bench.evaluators.sources import SourceFactory, non_caching_source_factory
from lazybind.bench.variables import VariableValue
from lazybind.logging.logger import get_logger

logger = get_logger(__name__)

ENGINE_NAME = "mini_racer"


def _js_literal(value: VariableValue) -> str:
    """Render an int or str as a JavaScript literal (JSON is a JS subset for these)."""
    return json.dumps(value)


class SharedContextEvaluator:
    """Evaluator over the factory's single MiniRacer context."""

    def __init__(self, context: Any, sources: SourceFactory) -> None:
        self._context = context
        self._sources = sources
        self._bound: set[str] = set()

    def bind(self, name: str, value: VariableValue) -> None:
        self._context.eval(f"globalThis[{_js_literal(name)}] = {_js_literal(value)};")
        self._bound.add(name)

    def evaluate(self, snippet: str) -> object:
        source = self._sources(snippet)
        try:
            return self._context.eval(source.text)
        except JSEvalException as err:
            raise EvaluationError(ENGINE_NAME, snippet, f"{source.name}: {err}") from err

    def release(self) -> None:
        if not self._bound:
            return
        deletes = " ".join(f"delete globalThis[{_js_literal(name)}];" for name in sorted(self._bound))
        self._bound.clear()
        self._context.eval(deletes)


class MiniRacerEvaluatorFactory:
    """
    Hands out SharedContextEvaluators that all share one V8 context.

    Args:
        source_factory: How snippets become ScriptSources. Defaults to the
            non-caching factory.
        v8_flags: Process-wide V8 flags (e.g. "--jitless" for interpreted
            mode). V8 can only be initialized once per process, so these are
            applied before the context is built and ignored if V8 is already
            up.
    """

    name = ENGINE_NAME

    def __init__(
        self,
        source_factory: SourceFactory | None = None,
        v8_flags: Iterable[str] = (),
    ) -> None:
        self.v8_flags = tuple(v8_flags)
        if self.v8_flags:
            from py_mini_racer import init_mini_racer

            init_mini_racer(flags=self.v8_flags, ignore_duplicate_init=True)

        self._sources = source_factory if source_factory is not None else non_caching_source_factory()
        self._context = MiniRacer()
        logger.debug(
            "Shared V8 context created",
            extra={"engine": self.name, "v8_flags": list(self.v8_flags)},
        )

    @property
    def sources(self) -> SourceFactory:
        return self._sources

    def acquire(self) -> SharedContextEvaluator:
        return SharedContextEvaluator(self._context, self._sources)

    def close(self) -> None:
        self._context.close()
