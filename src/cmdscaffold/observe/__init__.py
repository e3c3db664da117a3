"""Lifecycle event system -- listeners, the event host, and discovery.

Key classes:

* :class:`Listener` -- Abstract base class that all listeners must extend.
* :class:`EventHost` -- Delivers events to attached listeners in order.
* :class:`Event` -- Immutable name-plus-payload record handed to listeners.
* :class:`LifecycleEvent` -- Names of the events fired by a command run.
* :class:`LoggingListener` -- Writes every event to :mod:`logging`.

Example::

    from cmdscaffold.observe import EventHost, LoggingListener

    host = EventHost()
    host.attach(LoggingListener())
    host.notify("run")
"""

from cmdscaffold.observe.base import Event, LifecycleEvent, Listener
from cmdscaffold.observe.discovery import discover_listeners
from cmdscaffold.observe.host import EventHost
from cmdscaffold.observe.listeners import LoggingListener

__all__ = [
    "Event",
    "EventHost",
    "LifecycleEvent",
    "Listener",
    "LoggingListener",
    "discover_listeners",
]
