# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The variable space: every name a snippet could reference, with its value.

For a size S the space is:

    V0 ... V(S/2 - 1)   = 0 ... S/2 - 1          (int)
    V(S/2) ... V(S - 1) = "vS/2" ... "vS-1"       (str)

It is generated once per sweep and shared read-only by every run, so it is
returned as a MappingProxyType rather than a plain dict.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_SIZE = 100

VariableValue = int | str
VariableSpace = Mapping[str, VariableValue]


def variable_name(index: int) -> str:
    """Name of the variable at position `index`."""
    return f"V{index}"


def generate(size: int = DEFAULT_SIZE) -> VariableSpace:
    """
    Build the variable space for `size` variables.

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"Variable space size must be >= 0, got {size}")

    half = size // 2
    values: dict[str, VariableValue] = {}
    for index in range(half):
        values[variable_name(index)] = index
    for index in range(half, size):
        values[variable_name(index)] = f"v{index}"
    return MappingProxyType(values)
