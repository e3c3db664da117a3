"""Tests for the event host and bundled listeners."""

from __future__ import annotations

import logging

import pytest

from cmdscaffold.observe import Event, EventHost, LifecycleEvent, Listener, LoggingListener
from conftest import RecordingListener


class ExplodingListener(Listener):
    """Raises on every event."""

    def on_event(self, event: Event) -> None:
        raise RuntimeError(f"boom on {event.name}")


class SelfDetachingListener(Listener):
    """Detaches itself from its host on the first event."""

    def __init__(self, host: EventHost) -> None:
        self.host = host
        self.calls = 0

    def on_event(self, event: Event) -> None:
        self.calls += 1
        self.host.detach(self)


class OrderListener(Listener):
    def __init__(self, label: str, log: list[str]) -> None:
        self.label = label
        self.log = log

    def on_event(self, event: Event) -> None:
        self.log.append(self.label)


# ---------------------------------------------------------------------------
# EventHost
# ---------------------------------------------------------------------------


class TestEventHost:
    def test_notify_without_listeners(self) -> None:
        event = EventHost().notify("run")
        assert event == Event(name="run", data={})

    def test_delivers_name_and_payload(self) -> None:
        host = EventHost()
        recorder = RecordingListener()
        host.attach(recorder)
        host.notify("shutdown", {"status": 3})
        assert recorder.events == [Event(name="shutdown", data={"status": 3})]

    def test_lifecycle_enum_normalised_to_value(self) -> None:
        host = EventHost()
        recorder = RecordingListener()
        host.attach(recorder)
        host.notify(LifecycleEvent.PRE_MAIN)
        assert recorder.names == ["pre-main"]
        assert recorder.events[0].name == LifecycleEvent.PRE_MAIN

    def test_attachment_order(self) -> None:
        host = EventHost()
        log: list[str] = []
        for label in ("first", "second", "third"):
            host.attach(OrderListener(label, log))
        host.notify("run")
        assert log == ["first", "second", "third"]

    def test_duplicate_attachment_delivers_twice(self) -> None:
        host = EventHost()
        recorder = RecordingListener()
        host.attach(recorder)
        host.attach(recorder)
        host.notify("run")
        assert recorder.names == ["run", "run"]

    def test_detach(self) -> None:
        host = EventHost()
        recorder = RecordingListener()
        host.attach(recorder)
        host.detach(recorder)
        host.notify("run")
        assert recorder.events == []
        assert host.listeners == ()

    def test_detach_unknown_is_noop(self) -> None:
        host = EventHost()
        host.detach(RecordingListener())
        assert host.listeners == ()

    def test_detach_removes_one_attachment(self) -> None:
        host = EventHost()
        recorder = RecordingListener()
        host.attach(recorder)
        host.attach(recorder)
        host.detach(recorder)
        assert host.listeners == (recorder,)

    def test_listener_error_propagates_and_stops_dispatch(self) -> None:
        host = EventHost()
        before, after = RecordingListener(), RecordingListener()
        host.attach(before)
        host.attach(ExplodingListener())
        host.attach(after)
        with pytest.raises(RuntimeError, match="boom on run"):
            host.notify("run")
        assert before.names == ["run"]
        assert after.events == []

    def test_detach_during_dispatch_applies_to_next_event(self) -> None:
        host = EventHost()
        detaching = SelfDetachingListener(host)
        recorder = RecordingListener()
        host.attach(detaching)
        host.attach(recorder)
        host.notify("run")
        host.notify("shutdown")
        assert detaching.calls == 1
        assert recorder.names == ["run", "shutdown"]

    def test_payload_is_copied(self) -> None:
        host = EventHost()
        payload = {"status": 0}
        event = host.notify("shutdown", payload)
        payload["status"] = 1
        assert event.data == {"status": 0}


# ---------------------------------------------------------------------------
# LoggingListener
# ---------------------------------------------------------------------------


class TestLoggingListener:
    def test_logs_event_with_payload(self, caplog: pytest.LogCaptureFixture) -> None:
        host = EventHost()
        host.attach(LoggingListener(level=logging.INFO))
        with caplog.at_level(logging.INFO, logger="cmdscaffold.events"):
            host.notify("shutdown", {"status": 0})
        assert "event shutdown {'status': 0}" in caplog.text

    def test_logs_bare_event(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tests.events")
        listener = LoggingListener(logger=logger, level=logging.WARNING)
        with caplog.at_level(logging.WARNING, logger="tests.events"):
            listener.on_event(Event(name="run"))
        assert caplog.records[0].getMessage() == "event run"
        assert caplog.records[0].name == "tests.events"
