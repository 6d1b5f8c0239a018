# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The built-in snippet corpus.

Every snippet evaluates to `true` once the variables it references are bound
from the default variable space. They are written with a space around every
identifier, operator and bracket so that the naive token extraction in
lazybind.bench.references finds every referenced name. Each one is a single
expression rather than a statement: V8 returns the completion value of an
`if` statement but js2py returns None for it, so branches are written as
conditional expressions.

A few of them mutate a variable (`++ V1`). That is on purpose: if an engine
leaked bindings from one evaluation into the next, V1 would no longer be 1
and those snippets would start reporting mismatches.
"""

DEFAULT_SNIPPETS: tuple[str, ...] = (
    "V10 === V1 + V2 + V3 + V4",
    "V8 === ( V1 + V1 + V2 ) * V2",
    "( V48 + V1 == 49.0 ) ? ( ++ V1 === 2 ) : false",
    "( V1 ++ === 1 && ++ V1 === 3 )",
    "V58 === 'v58'",
    "V58 + ' ' + V59 === 'v58 v59'",
)
