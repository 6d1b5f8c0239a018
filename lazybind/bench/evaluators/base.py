# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The evaluator capability and its scoped lifetime.

An Evaluator wraps one execution context of some embedded script engine and
exposes the three things the benchmark needs from it:

    bind(name, value)   make a value visible to scripts under `name`
    evaluate(snippet)   run a snippet and return its result
    release()           hand the context back when done with it

An EvaluatorFactory hands out Evaluators. Whether `acquire()` builds a fresh
context or recycles a shared one is the factory's business, and it is exactly
the difference between the engines being compared.

Both are Protocols: the adapters are independent classes that happen to have
the right methods, there is no base class to inherit from.

Callers should never pair acquire()/release() by hand. Use EvaluatorContext,
which guarantees release() runs exactly once, including when evaluate()
raises:

    with EvaluatorContext(factory) as evaluator:
        evaluator.bind("V1", 1)
        result = evaluator.evaluate("V1 === 1")
"""

from types import TracebackType
from typing import Protocol, runtime_checkable

from lazybind.bench.variables import VariableValue


class EvaluationError(Exception):
    """
    Raised by an evaluator when its engine rejects a snippet (syntax error,
    ReferenceError, any other script exception). The engine's own exception is
    always chained as __cause__.
    """

    def __init__(self, engine: str, snippet: str, reason: str) -> None:
        super().__init__(f"[{engine}] failed to evaluate {snippet!r}: {reason}")
        self.engine = engine
        self.snippet = snippet
        self.reason = reason


@runtime_checkable
class Evaluator(Protocol):
    """One live execution context supporting bind-then-evaluate."""

    def bind(self, name: str, value: VariableValue) -> None:
        ...

    def evaluate(self, snippet: str) -> object:
        ...

    def release(self) -> None:
        ...


@runtime_checkable
class EvaluatorFactory(Protocol):
    """Creates or recycles Evaluators for one engine."""

    name: str

    def acquire(self) -> Evaluator:
        ...

    def close(self) -> None:
        ...


class EvaluatorContext:
    """
    Context manager that acquires an Evaluator on enter and releases it on exit.

    Release happens on every exit path, so a snippet that blows up inside
    evaluate() can't leave its bindings behind for the next snippet.
    Exceptions are never suppressed.
    """

    def __init__(self, factory: EvaluatorFactory) -> None:
        self._factory = factory
        self._evaluator: Evaluator | None = None

    def __enter__(self) -> Evaluator:
        self._evaluator = self._factory.acquire()
        return self._evaluator

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        evaluator, self._evaluator = self._evaluator, None
        if evaluator is not None:
            evaluator.release()
