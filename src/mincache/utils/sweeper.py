from __future__ import annotations

import logging
import typing as t

import anyio
from anyio.abc import TaskStatus

from ..errors import InvalidOptionsError

if t.TYPE_CHECKING:
    from ..cache.engine import MinCache

_logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodically calls ``delete_expired`` on a cache.

    The cache never schedules this itself. Run it inside an anyio task group
    owned by the application:

        async with anyio.create_task_group() as tg:
            await tg.start(sweeper.run)
    """

    def __init__(self, cache: "MinCache[t.Any]", interval_ms: t.Optional[int] = None) -> None:
        interval = cache.options.del_expired_ms if interval_ms is None else interval_ms
        if interval <= 0:
            raise InvalidOptionsError(f"interval_ms must be positive, got {interval}")
        self._cache = cache
        self._interval_ms = interval
        self._stopped = False
        self._stop_event: t.Optional[anyio.Event] = None
        self._sweeps = 0

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def sweeps(self) -> int:
        return self._sweeps

    def sweep_once(self) -> int:
        removed = self._cache.delete_expired()
        self._sweeps += 1
        if removed:
            _logger.debug("Sweep removed %d expired entries from cache %s", removed, self._cache.id)
        return removed

    def stop(self) -> None:
        """Ask a running loop to return; wakes it from its current wait."""
        self._stopped = True
        if self._stop_event is not None:
            self._stop_event.set()

    async def run(self, *, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
        self._stopped = False
        self._stop_event = anyio.Event()
        _logger.info("Expiry sweeper started for cache %s every %d ms", self._cache.id, self._interval_ms)
        task_status.started()
        try:
            while not self._stopped:
                with anyio.move_on_after(self._interval_ms / 1000.0):
                    await self._stop_event.wait()
                if self._stopped:
                    break
                self.sweep_once()
        finally:
            _logger.info("Expiry sweeper stopped for cache %s", self._cache.id)
