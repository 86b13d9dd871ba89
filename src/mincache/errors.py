from __future__ import annotations


class MinCacheError(Exception):
    """Base error for the cache package."""


class InvalidArgumentError(MinCacheError, ValueError):
    """Raised when a required argument is missing."""


class InvalidOptionsError(MinCacheError, ValueError):
    """Raised when cache options are malformed."""
