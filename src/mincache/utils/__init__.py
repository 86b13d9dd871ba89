"""Collaborators consumed by the cache engine."""

from .clock import Clock, SystemClock
from .config import CacheOptions
from .diagnostics import DiagnosticSink, LoggingSink
from .sizing import estimate_size
from .sweeper import ExpirySweeper

__all__ = [
    "CacheOptions",
    "Clock",
    "SystemClock",
    "DiagnosticSink",
    "LoggingSink",
    "ExpirySweeper",
    "estimate_size",
]
