# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Naive reference extraction.

A snippet is split on single spaces and every distinct piece is a token.
There is no awareness of operators or brackets, so an identifier only comes
out clean when it has a space on both sides:

    (FOO_1+FOO_2)       -> {"(FOO_1+FOO_2)"}
    (FOO_1 + FOO_2)     -> {"(FOO_1", "+", "FOO_2)"}
    ( FOO_1 + FOO_2 )   -> {"(", "FOO_1", "+", "FOO_2", ")"}

Only the last form lets the lazy binding strategies find FOO_1 and FOO_2.
The first two silently bind nothing and the snippet then fails at evaluation
time with a ReferenceError. The built-in corpus is written in the spaced
style; a real tokenizer would make the extraction cost part of what is being
measured, which is not the point of the benchmark.
"""


def tokens(snippet: str) -> frozenset[str]:
    """
    Return the distinct space-delimited tokens of a snippet.

    Empty pieces (from leading, trailing or doubled spaces) are dropped, so an
    empty snippet yields an empty set.
    """
    return frozenset(token for token in snippet.split(" ") if token)
