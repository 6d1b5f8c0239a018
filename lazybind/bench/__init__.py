# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The benchmark core.

Subsystems:
  - references: naive token extraction from snippet text
  - variables: the generated variable space
  - snippets: the built-in snippet corpus
  - evaluators: the engine adapters and the scoped evaluator lifetime
  - strategies: which variables get bound before each evaluation
  - runner: the timed loop and the strategy sweep
  - reporting: writing sweep results to disk
"""
