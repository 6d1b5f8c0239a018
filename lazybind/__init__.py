# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
lazybind: a stopwatch for variable binding overhead in embedded JavaScript engines.

The question this package answers is narrow: when a host program evaluates
lots of tiny script snippets, does it pay to bind only the variables a
snippet references instead of the whole variable space? The answer depends
on the engine, so the harness runs the same corpus against engines with
opposite cost profiles and reports how long each binding strategy took.

Subpackages:
  - bench: reference extraction, variable space, evaluators, strategies, runner
  - config: YAML + pydantic configuration
  - logging: structured JSON logger
  - runtime: startup checks
  - cli: the `lazybind` command
"""

__version__ = "0.1.0"
