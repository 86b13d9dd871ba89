"""mincache

An in-process key-value cache with time-based expiration and size-bounded
eviction, plus an optional anyio sweeper for eager expiry.
"""

from .cache import CacheEntry, MinCache
from .errors import InvalidArgumentError, InvalidOptionsError, MinCacheError
from .monitoring import CacheMetrics
from .utils import (
    CacheOptions,
    Clock,
    DiagnosticSink,
    ExpirySweeper,
    LoggingSink,
    SystemClock,
    estimate_size,
)

__all__ = [
    "MinCache",
    "CacheEntry",
    "CacheOptions",
    "CacheMetrics",
    "Clock",
    "SystemClock",
    "DiagnosticSink",
    "LoggingSink",
    "ExpirySweeper",
    "estimate_size",
    "MinCacheError",
    "InvalidArgumentError",
    "InvalidOptionsError",
]

__version__ = "0.1.0"
