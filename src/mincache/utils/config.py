from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import InvalidOptionsError

DEFAULT_TTL_MS = 60 * 1000
DEFAULT_MAX_SIZE_KB = 10 * 1024  # 10 MB
DEFAULT_DEL_EXPIRED_MS = 10000

# camelCase names accepted by from_dict
_ALIASES = {
    "ttlMs": "ttl_ms",
    "maxSizeKb": "max_size_kb",
    "delExpiredMs": "del_expired_ms",
}


@dataclass(frozen=True)
class CacheOptions:
    ttl_ms: int = DEFAULT_TTL_MS
    max_size_kb: Optional[int] = DEFAULT_MAX_SIZE_KB
    debug: bool = False
    del_expired_ms: int = DEFAULT_DEL_EXPIRED_MS

    def __post_init__(self) -> None:
        for name in ("ttl_ms", "del_expired_ms"):
            _check_int(name, getattr(self, name))
        if self.max_size_kb is not None:
            _check_int("max_size_kb", self.max_size_kb)
        if not isinstance(self.debug, bool):
            raise InvalidOptionsError(f"debug must be a bool, got {self.debug!r}")

    @property
    def max_size_bytes(self) -> Optional[int]:
        """Size budget in bytes, or None when eviction is disabled."""
        if not self.max_size_kb:
            return None
        return self.max_size_kb * 1024

    def merged(self, **overrides: Any) -> "CacheOptions":
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> "CacheOptions":
        known = {f.name for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidOptionsError(f"Unknown cache option: {key}")
            values[name] = value
        return cls(**values)


def _check_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptionsError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidOptionsError(f"{name} must not be negative, got {value}")
