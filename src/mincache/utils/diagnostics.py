from __future__ import annotations

import logging
import typing as t

Fields = t.Dict[str, t.Any]


class DiagnosticSink(t.Protocol):
    """Receives internal cache events when debug mode is on.

    Implementations must not raise or block; the cache treats them as a
    side-channel only.
    """

    def __call__(self, cache_id: str, message: str, fields: Fields) -> None:
        ...


class LoggingSink:
    """Forwards diagnostics to a stdlib logger at DEBUG level."""

    def __init__(self, logger: t.Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger("mincache.cache.engine")
        self._level = level

    def __call__(self, cache_id: str, message: str, fields: Fields) -> None:
        if fields:
            self._logger.log(self._level, "[MinCache: %s] %s %s", cache_id, message, fields)
        else:
            self._logger.log(self._level, "[MinCache: %s] %s", cache_id, message)

