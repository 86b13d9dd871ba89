from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        self.values[key] = self.values.get(key, 0.0) + value

    def total(self) -> float:
        return sum(self.values.values())


@dataclass
class Histogram:
    name: str
    help: str
    buckets: List[float]
    counts: Dict[Tuple, List[int]] = field(default_factory=dict)

    def observe(self, val: float, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        if key not in self.counts:
            # last slot counts values above the highest bucket
            self.counts[key] = [0 for _ in range(len(self.buckets) + 1)]
        for i, b in enumerate(self.buckets):
            if val <= b:
                self.counts[key][i] += 1
                break
        else:
            self.counts[key][-1] += 1

    def total(self) -> int:
        return sum(sum(c) for c in self.counts.values())


def _size_buckets() -> List[float]:
    return [64, 256, 1024, 4096, 16384, 65536, 262144, 1048576]


@dataclass
class CacheMetrics:
    """Per-instance cache counters."""

    hits: Counter = field(default_factory=lambda: Counter("mincache_hits_total", "Reads that found a live entry"))
    misses: Counter = field(default_factory=lambda: Counter("mincache_misses_total", "Reads that found nothing"))
    expirations: Counter = field(
        default_factory=lambda: Counter("mincache_expirations_total", "Entries removed because their TTL lapsed")
    )
    evictions: Counter = field(
        default_factory=lambda: Counter("mincache_evictions_total", "Entries removed to free space")
    )
    entry_size_bytes: Histogram = field(
        default_factory=lambda: Histogram("mincache_entry_size_bytes", "Approximate size of written values", _size_buckets())
    )

    def snapshot(self) -> Dict[str, float]:
        return {
            "hits": self.hits.total(),
            "misses": self.misses.total(),
            "expirations": self.expirations.total(),
            "evictions": self.evictions.total(),
            "writes": self.entry_size_bytes.total(),
        }

    def reset(self) -> None:
        for counter in (self.hits, self.misses, self.expirations, self.evictions):
            counter.values.clear()
        self.entry_size_bytes.counts.clear()
