"""Shared test fixtures for cmdscaffold.

Provides reusable command and listener helpers and keeps the global output
state isolated between tests. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from cmdscaffold.command import Command
from cmdscaffold.observe.base import Event, Listener
from cmdscaffold.options import Option
from cmdscaffold.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingListener(Listener):
    """Collects every event it receives."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    @property
    def names(self) -> list[str]:
        return [event.name for event in self.events]

    def on_event(self, event: Event) -> None:
        self.events.append(event)


class SampleCommand(Command):
    """Command with a fixed argument list and a value and a flag option."""

    def __init__(
        self,
        argv: Sequence[str] = ("sample",),
        status: int = 0,
        listener: Optional[Listener] = None,
        **kwargs: Any,
    ) -> None:
        self.argv = list(argv)
        self.status = status
        self.main_calls = 0
        self.constructed_calls = 0
        self._initial_listener = listener
        super().__init__(**kwargs)

    def constructed(self) -> None:
        self.constructed_calls += 1
        if self._initial_listener is not None:
            self.attach(self._initial_listener)

    def add_options(self) -> None:
        self.add_option(Option("o", True, "Output file.", "output", default="out.txt"))
        self.add_option(Option("v", False, "Verbose output.", "verbose"))

    def provide_flat_options(self) -> Sequence[str]:
        return self.argv

    def main(self) -> int:
        self.main_calls += 1
        return self.status


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _plain_output_between_tests() -> None:
    """Install a PLAIN OutputManager for each test and reset it afterwards.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, so it is created inside each test where capsys has
    already swapped the streams.
    """
    set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Listener and command fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def recorder() -> RecordingListener:
    """A fresh recording listener."""
    return RecordingListener()


@pytest.fixture
def make_command(recorder: RecordingListener) -> Callable[..., SampleCommand]:
    """Factory for :class:`SampleCommand` instances with *recorder* attached.

    The listener is attached from the ``constructed`` hook, so it also sees
    the ``constructed`` event.
    """

    def _make(*argv: str, status: int = 0, **kwargs: Any) -> SampleCommand:
        return SampleCommand(
            argv=("/usr/local/bin/sample", *argv),
            status=status,
            listener=recorder,
            **kwargs,
        )

    return _make


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_DATA_HOME at tmp_path and clear CMDSCAFFOLD_* variables.

    Returns:
        The data directory that crash logs will be written under.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in [
        "CMDSCAFFOLD_OUTPUT",
        "CMDSCAFFOLD_NO_COLOR",
        "CMDSCAFFOLD_VERBOSE",
        "CMDSCAFFOLD_LISTENERS_ENABLED",
        "CMDSCAFFOLD_LISTENERS_DISABLED",
        "NO_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("cmdscaffold.config._is_xdg_platform", lambda: True)
    return tmp_path / "data" / "cmdscaffold"
