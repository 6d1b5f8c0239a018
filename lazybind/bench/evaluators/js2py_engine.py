# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Pure-Python JavaScript evaluators via Js2Py: the context-per-call engine.

Cost profile is the mirror image of the V8 adapter:
  - an EvalJs context is just a Python scope object, cheap enough to build a
    fresh one for every acquisition
  - binding is a Python attribute store on that scope, so binding extra
    variables costs little

With a fresh context per acquisition there is nothing to clean up, and
release() does nothing.
"""

import js2py

from lazybind.bench.evaluators.base import EvaluationError
from lazybind.bench.evaluators.sources import SourceFactory, non_caching_source_factory
from lazybind.bench.variables import VariableValue

ENGINE_NAME = "js2py"


class PerCallEvaluator:
    """Evaluator over its own, private EvalJs context."""

    def __init__(self, sources: SourceFactory) -> None:
        self._context = js2py.EvalJs()
        self._sources = sources

    def bind(self, name: str, value: VariableValue) -> None:
        setattr(self._context, name, value)

    def evaluate(self, snippet: str) -> object:
        source = self._sources(snippet)
        try:
            return self._context.eval(source.text)
        # js2py reports script errors as PyJsException but translation
        # failures surface as assorted plain Python exceptions.
        except Exception as err:
            raise EvaluationError(ENGINE_NAME, snippet, f"{source.name}: {err}") from err

    def release(self) -> None:
        pass


class Js2PyEvaluatorFactory:
    """Builds a new PerCallEvaluator, and with it a new context, on every acquire()."""

    name = ENGINE_NAME

    def __init__(self, source_factory: SourceFactory | None = None) -> None:
        self._sources = source_factory if source_factory is not None else non_caching_source_factory()

    @property
    def sources(self) -> SourceFactory:
        return self._sources

    def acquire(self) -> PerCallEvaluator:
        return PerCallEvaluator(self._sources)

    def close(self) -> None:
        pass
