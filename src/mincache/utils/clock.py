from __future__ import annotations

import time
import typing as t


class Clock(t.Protocol):
    """Source of the current time in integer milliseconds."""

    def now_ms(self) -> int:
        ...


class SystemClock:
    def now_ms(self) -> int:
        return int(time.time() * 1000)
