# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the caching and non-caching source factories."""

import dataclasses

import pytest

from lazybind.bench.evaluators.sources import (
    ScriptSource,
    SourceCache,
    caching_source_factory,
    non_caching_source_factory,
)


class TestNonCaching:
    def test_new_source_every_call(self) -> None:
        create = non_caching_source_factory()
        first = create("V1 === 1")
        second = create("V1 === 1")
        assert first == second
        assert first is not second
        assert first.text == "V1 === 1"


class TestSourceCache:
    def test_returns_same_source_for_same_text(self) -> None:
        cache = caching_source_factory()
        assert cache("V1 === 1") is cache("V1 === 1")

    def test_distinct_text_gets_distinct_names(self) -> None:
        cache = SourceCache()
        first = cache("V1 === 1")
        second = cache("V2 === 2")
        assert first.name != second.name
        assert len(cache) == 2

    def test_counts_hits_and_misses(self) -> None:
        cache = SourceCache()
        for _ in range(3):
            cache("V1 === 1")
        cache("V2 === 2")
        assert cache.misses == 2
        assert cache.hits == 2

    def test_sources_are_frozen(self) -> None:
        source = ScriptSource(name="snippet", text="true")
        with pytest.raises(dataclasses.FrozenInstanceError):
            source.text = "false"  # type: ignore[misc]
