# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Engine registry for lazybind.

Maps the config-level engine name (`bench.engine.name`) to a builder that
turns an EngineConfig into a ready EvaluatorFactory. The built-in engines are
registered once at import time via `_register_builtins()`.

Builders import their engine library lazily, so asking for `mini_racer`
never requires js2py to be importable and vice versa.
"""

from collections.abc import Callable

from lazybind.bench.evaluators.base import EvaluatorFactory
from lazybind.bench.evaluators.sources import (
    SourceFactory,
    caching_source_factory,
    non_caching_source_factory,
)
from lazybind.config.schema import EngineConfig
from lazybind.logging.logger import get_logger

logger = get_logger(__name__)

EngineBuilder = Callable[[EngineConfig], EvaluatorFactory]

_ENGINE_REGISTRY: dict[str, EngineBuilder] = {}


def register_engine(name: str, builder: EngineBuilder) -> None:
    """
    Register an engine builder under a unique name.

    Raises:
        ValueError: If ``name`` is already registered.
    """
    if name in _ENGINE_REGISTRY:
        raise ValueError(f"Engine '{name}' is already registered")
    _ENGINE_REGISTRY[name] = builder
    logger.debug("registered_engine", extra={"engine": name})


def get_engine(name: str) -> EngineBuilder:
    """
    Retrieve a registered engine builder by name.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    if name not in _ENGINE_REGISTRY:
        available = sorted(_ENGINE_REGISTRY.keys())
        raise KeyError(f"Unknown engine '{name}'. Available: {available}")
    return _ENGINE_REGISTRY[name]


def list_engines() -> list[str]:
    """Return sorted list of all registered engine names."""
    return sorted(_ENGINE_REGISTRY.keys())


def create_factory(config: EngineConfig) -> EvaluatorFactory:
    """Build the EvaluatorFactory described by an EngineConfig."""
    return get_engine(config.name)(config)


def _source_factory_for(config: EngineConfig) -> SourceFactory:
    if config.cache_sources:
        return caching_source_factory()
    return non_caching_source_factory()


def _build_mini_racer(config: EngineConfig) -> EvaluatorFactory:
    from lazybind.bench.evaluators.mini_racer_engine import MiniRacerEvaluatorFactory

    return MiniRacerEvaluatorFactory(
        source_factory=_source_factory_for(config),
        v8_flags=config.v8_flags,
    )


def _build_js2py(config: EngineConfig) -> EvaluatorFactory:
    from lazybind.bench.evaluators.js2py_engine import Js2PyEvaluatorFactory

    if config.v8_flags:
        logger.warning(
            "v8_flags ignored for non-V8 engine",
            extra={"engine": config.name, "v8_flags": config.v8_flags},
        )
    return Js2PyEvaluatorFactory(source_factory=_source_factory_for(config))


def _register_builtins() -> None:
    register_engine("mini_racer", _build_mini_racer)
    register_engine("js2py", _build_js2py)


_register_builtins()
