# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Source factories: snippet text in, ScriptSource out.

Evaluators never hand raw strings to their engine directly. They go through a
source factory, which is where snippet preparation can be memoized. The corpus
is tiny and every snippet is evaluated thousands of times, so the caching
factory turns all but the first sighting of each snippet into a dict lookup.

The cache is keyed by snippet text only. It knows nothing about evaluators or
contexts and can be shared by every acquisition of a factory.
"""

from collections.abc import Callable
from dataclasses import dataclass

from lazybind.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScriptSource:
    """A snippet prepared for evaluation, tagged with a name for error messages."""

    name: str
    text: str


SourceFactory = Callable[[str], ScriptSource]


class SourceCache:
    """Memoizing source factory with hit/miss counters."""

    def __init__(self) -> None:
        self._sources: dict[str, ScriptSource] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, snippet: str) -> ScriptSource:
        source = self._sources.get(snippet)
        if source is not None:
            self.hits += 1
            return source

        self.misses += 1
        source = ScriptSource(name=f"snippet-{len(self._sources) + 1}", text=snippet)
        self._sources[snippet] = source
        logger.debug("Caching source", extra={"source": source.name, "snippet": snippet})
        return source

    def __len__(self) -> int:
        return len(self._sources)


def non_caching_source_factory() -> SourceFactory:
    """A source factory that builds a new ScriptSource for every call."""

    def _create(snippet: str) -> ScriptSource:
        return ScriptSource(name="snippet", text=snippet)

    return _create


def caching_source_factory() -> SourceCache:
    """A source factory that returns the same ScriptSource for a repeated snippet."""
    return SourceCache()
