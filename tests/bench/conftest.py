# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared fixtures for benchmark core tests.

Most tests run against a recording fake engine: it remembers every bind,
evaluate and release, so strategies and the runner can be checked without a
JavaScript engine at all. The real engine fixtures skip when their library
isn't importable.
"""

from collections.abc import Iterator

import pytest

from lazybind.bench.evaluators.base import EvaluationError
from lazybind.bench.variables import VariableSpace, VariableValue, generate


class RecordingEvaluator:
    """Fake evaluator that records calls. Snippets evaluate to True unless told otherwise."""

    def __init__(self, factory: "RecordingFactory") -> None:
        self._factory = factory
        self.bindings: dict[str, VariableValue] = {}
        self.bind_calls = 0
        self.evaluated: list[str] = []
        self.release_calls = 0

    def bind(self, name: str, value: VariableValue) -> None:
        self.bind_calls += 1
        self.bindings[name] = value

    def evaluate(self, snippet: str) -> object:
        self.evaluated.append(snippet)
        if snippet in self._factory.failing:
            raise EvaluationError(self._factory.name, snippet, "rejected by fake engine")
        return self._factory.results.get(snippet, True)

    def release(self) -> None:
        self.release_calls += 1


class RecordingFactory:
    """Fake factory handing out a fresh RecordingEvaluator per acquire()."""

    name = "recording"

    def __init__(self) -> None:
        self.acquired: list[RecordingEvaluator] = []
        self.failing: set[str] = set()
        self.results: dict[str, object] = {}
        self.closed = False

    def acquire(self) -> RecordingEvaluator:
        evaluator = RecordingEvaluator(self)
        self.acquired.append(evaluator)
        return evaluator

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture()
def recording_evaluator(recording_factory: RecordingFactory) -> RecordingEvaluator:
    return recording_factory.acquire()


@pytest.fixture(scope="session")
def variables() -> VariableSpace:
    """The default 100-entry variable space."""
    return generate(100)


@pytest.fixture()
def mini_racer_factory() -> Iterator[object]:
    """A V8-backed context-sharing factory, closed after the test."""
    pytest.importorskip("py_mini_racer")
    from lazybind.bench.evaluators.mini_racer_engine import MiniRacerEvaluatorFactory

    factory = MiniRacerEvaluatorFactory()
    yield factory
    factory.close()


@pytest.fixture()
def js2py_factory() -> object:
    """A Js2Py-backed context-per-call factory."""
    js2py = pytest.importorskip("js2py")
    try:
        js2py.EvalJs().eval("1 + 1")
    except Exception as err:
        pytest.skip(f"js2py does not work on this interpreter: {err}")
    from lazybind.bench.evaluators.js2py_engine import Js2PyEvaluatorFactory

    return Js2PyEvaluatorFactory()
