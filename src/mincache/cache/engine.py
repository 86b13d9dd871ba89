"""In-process key-value cache with TTL expiry and size-bounded eviction.

Expiry is enforced lazily and not every accessor reconciles it the same way:

* ``get``, ``exists`` and ``keys`` delete expired entries they come across.
* ``ttl``, ``get_all`` and ``scan`` only read; expired entries stay in the map
  (and in ``size()``) until another path removes them.
* ``delete_expired`` sweeps the whole map on demand.

Eviction runs on ``set`` when a size budget is configured and removes the
entries closest to expiring first, whether or not they have expired yet.

Instances are not thread-safe; every call, reads included, may mutate state.
"""

from __future__ import annotations

import logging
import re
import typing as t

from ..errors import InvalidArgumentError
from ..monitoring.metrics import CacheMetrics
from ..utils.clock import Clock, SystemClock
from ..utils.config import DEFAULT_TTL_MS, CacheOptions
from ..utils.diagnostics import DiagnosticSink, LoggingSink
from ..utils.sizing import estimate_size
from .models import CacheEntry

_logger = logging.getLogger(__name__)

T = t.TypeVar("T")


class MinCache(t.Generic[T]):
    def __init__(
        self,
        cache_id: str,
        options: t.Optional[CacheOptions] = None,
        *,
        clock: t.Optional[Clock] = None,
        sink: t.Optional[DiagnosticSink] = None,
    ) -> None:
        self._id = cache_id
        self._options = options or CacheOptions()
        self._clock = clock or SystemClock()
        self._debug = self._options.debug
        self._sink: DiagnosticSink = sink or LoggingSink()
        self._storage: t.Dict[str, CacheEntry[T]] = {}
        self._current_size_bytes = 0
        self._metrics = CacheMetrics()

    @property
    def id(self) -> str:
        return self._id

    @property
    def options(self) -> CacheOptions:
        return self._options

    @property
    def metrics(self) -> CacheMetrics:
        return self._metrics

    def _log(self, message: str, **fields: t.Any) -> None:
        if not self._debug:
            return
        try:
            self._sink(self._id, message, fields)
        except Exception:  # noqa: BLE001 - diagnostics never affect results
            _logger.warning("Diagnostic sink failed for cache %s", self._id, exc_info=True)

    def _release_space_if_needed(self, new_item_size: int) -> None:
        max_size_bytes = self._options.max_size_bytes
        if max_size_bytes is None:
            return
        if self._current_size_bytes + new_item_size <= max_size_bytes:
            return

        # soonest to expire first; sorted() is stable so ties keep map order
        by_expiry = sorted(self._storage.items(), key=lambda kv: kv[1].expires_at)

        freed = 0
        for key, entry in by_expiry:
            if self._current_size_bytes + new_item_size - freed <= max_size_bytes:
                break
            del self._storage[key]
            freed += entry.size
            self._metrics.evictions.inc()
            self._log(f'Cleared "{key}" to free up some space')

        self._current_size_bytes -= freed

    def size(self) -> int:
        """Approximate bytes held by entries currently in the map."""
        return self._current_size_bytes

    def delete(self, key: str, reason: t.Optional[str] = None) -> bool:
        entry = self._storage.pop(key, None)
        if entry is None:
            return False

        self._current_size_bytes -= entry.size
        reason_str = f"({reason})" if reason else ""
        self._log(f'Cleared key "{key}" {reason_str}'.rstrip())
        return True

    def delete_expired(self) -> int:
        now = self._clock.now_ms()
        expired = [key for key, entry in self._storage.items() if entry.is_expired(now)]
        for key in expired:
            self.delete(key, "expired")
        self._metrics.expirations.inc(len(expired))

        self._log(f"Cleared {len(expired)} expired items")
        return len(expired)

    def delete_all(self) -> None:
        self._storage.clear()
        self._current_size_bytes = 0
        self._log("Cleared all items")

    def set(self, key: str, value: T, ttl_ms: t.Optional[int] = None) -> bool:
        self._log(f'Adding "{key}"')

        if key is None:
            raise InvalidArgumentError("Missing required field: key")
        if value is None:
            raise InvalidArgumentError("Missing required field: value")

        if ttl_ms is None:
            # a configured ttl_ms of 0 falls back to the hard default
            ttl_ms = self._options.ttl_ms or DEFAULT_TTL_MS
        expires_at = self._clock.now_ms() + ttl_ms
        size = estimate_size(value)

        self._release_space_if_needed(size)

        previous = self._storage.get(key)
        if previous is not None:
            self._current_size_bytes -= previous.size
        self._storage[key] = CacheEntry(data=value, expires_at=expires_at, size=size)
        self._current_size_bytes += size
        self._metrics.entry_size_bytes.observe(size)

        self._log(f'Added key "{key}"', expires_at=expires_at, size_bytes=size)
        return True

    def get(self, key: str) -> t.Optional[T]:
        self._log(f'Getting "{key}"')
        entry = self._storage.get(key)

        if entry is None:
            self._metrics.misses.inc()
            self._log(f'Key "{key}" not found')
            return None

        if entry.is_expired(self._clock.now_ms()):
            self._metrics.misses.inc()
            self._metrics.expirations.inc()
            self._log(f'Key "{key}" expired')
            self.delete(key, "expired")
            return None

        self._metrics.hits.inc()
        return entry.data

    def get_all(self) -> t.Dict[str, T]:
        now = self._clock.now_ms()
        return {key: entry.data for key, entry in self._storage.items() if not entry.is_expired(now)}

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    def keys(self) -> t.List[str]:
        now = self._clock.now_ms()
        live: t.List[str] = []
        for key, entry in list(self._storage.items()):
            if entry.is_expired(now):
                self._metrics.expirations.inc()
                self.delete(key, "expired")
                continue
            live.append(key)
        return live

    def ttl(self, key: str) -> int:
        """Whole seconds left before ``key`` expires, or -1.

        Read-only: an expired entry is reported as -1 but not removed.
        """
        entry = self._storage.get(key)
        if entry is None:
            self._log(f'Key "{key}" not found for TTL')
            return -1

        remaining = entry.expires_at - self._clock.now_ms()
        return int(remaining // 1000) if remaining > 0 else -1

    def set_ttl(self, key: str, ttl_ms: int) -> bool:
        entry = self._storage.get(key)
        if entry is None:
            self._log(f'Key "{key}" not found for EXPIRE')
            return False

        if ttl_ms <= 0:
            self._log(f'Invalid ttl_ms for key "{key}": {ttl_ms}')
            return False

        entry.expires_at = self._clock.now_ms() + ttl_ms
        self._log(f'Set new expiration for key "{key}"', expires_at=entry.expires_at)
        return True

    def rename(self, old_key: str, new_key: str) -> bool:
        entry = self._storage.get(old_key)
        if entry is None:
            self._log(f'Key "{old_key}" not found for RENAME')
            return False

        if new_key in self._storage:
            self._log(f'Key "{new_key}" already exists, cannot rename "{old_key}"')
            return False

        del self._storage[old_key]
        self._storage[new_key] = entry
        self._log(f'Renamed key "{old_key}" to "{new_key}"')
        return True

    def scan(self, pattern: str, count: t.Optional[int] = None) -> t.List[str]:
        """Keys matching a single-wildcard pattern.

        Only the first ``*`` becomes ``.*``; the remainder is used as a regular
        expression and matched anywhere in the key. Expired entries that are
        still in the map are included.
        """
        regex = re.compile(pattern.replace("*", ".*", 1))
        matches: t.List[str] = []

        for key in self._storage:
            if regex.search(key):
                matches.append(key)
                if count and len(matches) >= count:
                    break

        self._log(f'Scanned {len(matches)} keys matching pattern "{pattern}"')
        return matches

    def __len__(self) -> int:
        """Entries in the map, including expired ones not yet purged."""
        return len(self._storage)

    def __repr__(self) -> str:
        return f"MinCache(id={self._id!r}, entries={len(self._storage)}, size_bytes={self._current_size_bytes})"
