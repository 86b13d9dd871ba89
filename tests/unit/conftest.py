"""Shared fixtures for unit tests."""

from __future__ import annotations

import typing as t

import pytest

from mincache import CacheOptions, MinCache


class FakeClock:
    """Manually advanced clock in epoch milliseconds."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self.now = start_ms

    def now_ms(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingSink:
    """Diagnostic sink that keeps every call for inspection."""

    def __init__(self) -> None:
        self.records: t.List[t.Tuple[str, str, t.Dict[str, t.Any]]] = []

    def __call__(self, cache_id: str, message: str, fields: t.Dict[str, t.Any]) -> None:
        self.records.append((cache_id, message, fields))

    @property
    def messages(self) -> t.List[str]:
        return [message for _, message, _ in self.records]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_cache(clock):
    """Build a cache bound to the fake clock."""

    def factory(cache_id: str = "test", sink=None, **options: t.Any) -> MinCache:
        return MinCache(cache_id, CacheOptions(**options), clock=clock, sink=sink)

    return factory


@pytest.fixture
def cache(make_cache):
    """Cache with the default options."""
    return make_cache()
