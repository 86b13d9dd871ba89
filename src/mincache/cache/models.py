from __future__ import annotations

import typing as t
from dataclasses import dataclass

T = t.TypeVar("T")


@dataclass
class CacheEntry(t.Generic[T]):
    data: T
    expires_at: int  # epoch milliseconds
    size: int  # approximate bytes, fixed at write time

    def is_expired(self, now_ms: int) -> bool:
        return self.expires_at < now_ms
