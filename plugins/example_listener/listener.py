"""Example listener that reports lifecycle progress to stderr."""

from __future__ import annotations

import sys
import time
from typing import Optional

from cmdscaffold.observe.base import Event, LifecycleEvent, Listener


class ExampleListener(Listener):
    """Prints each event and the run's duration to stderr.

    Register it through the ``cmdscaffold.listeners`` entry-point group::

        [project.entry-points."cmdscaffold.listeners"]
        example = "example_listener.listener:ExampleListener"
    """

    def __init__(self) -> None:
        self._started: Optional[float] = None

    def on_event(self, event: Event) -> None:
        print(f"[example] {event.name}", file=sys.stderr)
        if event.name == LifecycleEvent.RUN:
            self._started = time.monotonic()
        elif event.name == LifecycleEvent.SHUTDOWN and self._started is not None:
            elapsed = time.monotonic() - self._started
            status = event.data.get("status")
            print(f"[example] status {status} after {elapsed:.3f}s", file=sys.stderr)
            self._started = None
