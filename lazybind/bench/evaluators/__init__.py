# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Evaluator capability, engine adapters and source factories.

  - base: Evaluator / EvaluatorFactory protocols, EvaluationError, EvaluatorContext
  - sources: caching and non-caching snippet source factories
  - mini_racer_engine: V8, one shared context, expensive binding
  - js2py_engine: pure-Python JS, a context per acquisition, cheap binding
  - registry: engine name -> factory builder
"""
