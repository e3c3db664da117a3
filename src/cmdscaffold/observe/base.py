"""Event and listener definitions for the command lifecycle.

Every listener must subclass :class:`Listener` and implement
:meth:`~Listener.on_event`. A listener receives every event fired by the
:class:`~cmdscaffold.observe.host.EventHost` it is attached to and decides
for itself which ones matter.

Example:
    Listener that records when the command finished::

        class ShutdownRecorder(Listener):
            def __init__(self) -> None:
                self.status = None

            def on_event(self, event: Event) -> None:
                if event.name == LifecycleEvent.SHUTDOWN:
                    self.status = event.data.get("status")
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class LifecycleEvent(str, enum.Enum):
    """Names of the events fired by :class:`~cmdscaffold.command.Command`.

    Members compare equal to their string values, so listeners may match on
    either ``LifecycleEvent.RUN`` or ``"run"``.
    """

    CONSTRUCTED = "constructed"
    RUN = "run"
    OPTIONS_ADDED = "options-added"
    OPTIONS_AVAILABLE = "options-available"
    OUTPUT = "output"
    PRE_MAIN = "pre-main"
    SHUTDOWN = "shutdown"


@dataclass(frozen=True)
class Event:
    """A named notification with an arbitrary payload.

    Attributes:
        name: Event name, usually a :class:`LifecycleEvent` value.
        data: Payload supplied by the notifier. Empty when none was given.
    """

    name: str
    data: dict[str, Any] = field(default_factory=dict)


class Listener(ABC):
    """Base class for lifecycle listeners."""

    @abstractmethod
    def on_event(self, event: Event) -> None:
        """Handle *event*.

        Exceptions raised here are not caught: they propagate to whoever
        fired the event and stop delivery to the listeners after this one.
        """
        ...
