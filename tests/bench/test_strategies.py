# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the binding strategies.

The contract: bind_all binds everything, the two lazy strategies bind
exactly the referenced variables and always agree with each other.
"""

import pytest

from lazybind.bench.snippets import DEFAULT_SNIPPETS
from lazybind.bench.strategies import (
    BindAll,
    BindingStrategy,
    BindReferenced,
    BindReferencedInefficient,
    get_strategy,
    list_strategies,
)
from lazybind.bench.variables import VariableSpace

SNIPPET_V3_V70 = "V3 + '-' + V70 === '3-v70'"


class TestBindAll:
    def test_binds_every_variable(self, recording_evaluator, variables: VariableSpace) -> None:
        BindAll().apply(recording_evaluator, SNIPPET_V3_V70, variables)
        assert recording_evaluator.bindings == dict(variables)
        assert recording_evaluator.bind_calls == len(variables)

    def test_ignores_snippet(self, recording_evaluator, variables: VariableSpace) -> None:
        BindAll().apply(recording_evaluator, "", variables)
        assert len(recording_evaluator.bindings) == len(variables)


@pytest.mark.parametrize("strategy", [BindReferenced(), BindReferencedInefficient()])
class TestLazyStrategies:
    def test_binds_only_referenced(
        self, strategy: BindingStrategy, recording_evaluator, variables: VariableSpace,
    ) -> None:
        strategy.apply(recording_evaluator, SNIPPET_V3_V70, variables)
        assert recording_evaluator.bindings == {"V3": 3, "V70": "v70"}

    def test_each_variable_bound_once(
        self, strategy: BindingStrategy, recording_evaluator, variables: VariableSpace,
    ) -> None:
        strategy.apply(recording_evaluator, "V1 + V1 + V1", variables)
        assert recording_evaluator.bind_calls == 1

    def test_unknown_tokens_are_skipped(
        self, strategy: BindingStrategy, recording_evaluator, variables: VariableSpace,
    ) -> None:
        strategy.apply(recording_evaluator, "V100 + NOPE + V3", variables)
        assert recording_evaluator.bindings == {"V3": 3}

    def test_unspaced_references_bind_nothing(
        self, strategy: BindingStrategy, recording_evaluator, variables: VariableSpace,
    ) -> None:
        strategy.apply(recording_evaluator, "(V3+V70)", variables)
        assert recording_evaluator.bindings == {}


class TestLazyStrategiesAgree:
    @pytest.mark.parametrize("snippet", [*DEFAULT_SNIPPETS, SNIPPET_V3_V70, "", "(V1+V2)"])
    def test_identical_binding_sets(
        self, recording_factory, variables: VariableSpace, snippet: str,
    ) -> None:
        fast = recording_factory.acquire()
        slow = recording_factory.acquire()
        BindReferenced().apply(fast, snippet, variables)
        BindReferencedInefficient().apply(slow, snippet, variables)
        assert fast.bindings == slow.bindings


class TestStrategyLookup:
    def test_names_in_comparison_order(self) -> None:
        assert list_strategies() == [
            "bind_all",
            "bind_referenced",
            "bind_referenced_inefficient",
        ]

    def test_get_strategy_by_name(self) -> None:
        assert isinstance(get_strategy("bind_referenced"), BindReferenced)

    def test_unknown_strategy_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown binding strategy"):
            get_strategy("bind_some")

    def test_strategies_satisfy_protocol(self) -> None:
        for name in list_strategies():
            assert isinstance(get_strategy(name), BindingStrategy)
