"""Ready-made listeners."""

from __future__ import annotations

import logging
from typing import Optional

from cmdscaffold.observe.base import Event, Listener


class LoggingListener(Listener):
    """Writes every event it receives to a :mod:`logging` logger.

    Args:
        logger: Target logger. Defaults to ``cmdscaffold.events``.
        level: Log level for the records.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger("cmdscaffold.events")
        self._level = level

    def on_event(self, event: Event) -> None:
        if event.data:
            self._logger.log(self._level, "event %s %r", event.name, event.data)
        else:
            self._logger.log(self._level, "event %s", event.name)
