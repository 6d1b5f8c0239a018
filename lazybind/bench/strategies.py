# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Binding strategies: what gets bound into an Evaluator before a snippet runs.

    bind_all                     every variable, referenced or not
    bind_referenced              only variables named by a snippet token,
                                 found by looking each token up: O(tokens)
    bind_referenced_inefficient  the same set, found by scanning the whole
                                 variable space for tokens: O(variables)

The last two always bind identical sets. They exist side by side to show
that how the lazy filter is computed matters as much as the decision to
filter: on an engine where binding is cheap, scanning a large variable space
on every evaluation can cost more than the bindings it saves.

A token that isn't a variable name is skipped without complaint. Most tokens
are operators and brackets, and skipping them is the whole idea.
"""

from typing import Protocol, runtime_checkable

from lazybind.bench.evaluators.base import Evaluator
from lazybind.bench.references import tokens
from lazybind.bench.variables import VariableSpace


@runtime_checkable
class BindingStrategy(Protocol):
    """Decides which (name, value) pairs to push into an evaluator."""

    name: str

    def apply(self, evaluator: Evaluator, snippet: str, variables: VariableSpace) -> None:
        ...


class BindAll:
    name = "bind_all"

    def apply(self, evaluator: Evaluator, snippet: str, variables: VariableSpace) -> None:
        for var_name, value in variables.items():
            evaluator.bind(var_name, value)


class BindReferenced:
    name = "bind_referenced"

    def apply(self, evaluator: Evaluator, snippet: str, variables: VariableSpace) -> None:
        for token in tokens(snippet):
            if token in variables:
                evaluator.bind(token, variables[token])


class BindReferencedInefficient:
    name = "bind_referenced_inefficient"

    def apply(self, evaluator: Evaluator, snippet: str, variables: VariableSpace) -> None:
        referenced = tokens(snippet)
        for var_name, value in variables.items():
            if var_name in referenced:
                evaluator.bind(var_name, value)


_STRATEGIES: dict[str, BindingStrategy] = {
    strategy.name: strategy
    for strategy in (BindAll(), BindReferenced(), BindReferencedInefficient())
}


def get_strategy(name: str) -> BindingStrategy:
    """
    Look up a strategy by its config-level name.

    Raises:
        KeyError: If no strategy has that name.
    """
    if name not in _STRATEGIES:
        available = sorted(_STRATEGIES.keys())
        raise KeyError(f"Unknown binding strategy '{name}'. Available: {available}")
    return _STRATEGIES[name]


def list_strategies() -> list[str]:
    """Strategy names in their canonical comparison order."""
    return list(_STRATEGIES.keys())
