"""Synchronous event host.

:class:`EventHost` keeps listeners in attachment order and delivers each
event to all of them before :meth:`EventHost.notify` returns. There is no
queueing and no isolation between listeners: an exception from one listener
propagates to the caller and the remaining listeners are not notified.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

from cmdscaffold.observe.base import Event, Listener

logger = logging.getLogger(__name__)


class EventHost:
    """Holds listeners and notifies them in the order they were attached.

    The same listener may be attached more than once, in which case it
    receives each event once per attachment.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def listeners(self) -> tuple[Listener, ...]:
        """Snapshot of the attached listeners in attachment order."""
        return tuple(self._listeners)

    def attach(self, listener: Listener) -> None:
        """Append *listener* to the dispatch list."""
        self._listeners.append(listener)

    def detach(self, listener: Listener) -> None:
        """Remove the earliest attachment of *listener*, if any."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify(self, name: str, data: Optional[dict[str, Any]] = None) -> Event:
        """Deliver an event named *name* to every attached listener.

        Dispatch runs over a snapshot, so listeners attached or detached by a
        listener take effect from the next event.

        Args:
            name: Event name.
            data: Optional payload; an empty dict is delivered when omitted.

        Returns:
            The delivered :class:`~cmdscaffold.observe.base.Event`.
        """
        if isinstance(name, enum.Enum):
            name = name.value
        event = Event(name=name, data=dict(data or {}))
        listeners = tuple(self._listeners)
        logger.debug("Dispatching '%s' to %d listener(s)", event.name, len(listeners))
        for listener in listeners:
            listener.on_event(event)
        return event
