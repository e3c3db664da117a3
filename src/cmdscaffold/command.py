"""Abstract command base class.

:class:`Command` is an instance of the template method pattern. Its
:meth:`~Command.run` method fixes the order of a command-line run::

    run -> add_options() -> built-in help option -> options-added
        -> parse and populate -> options-available
        -> (help requested?  print usage -> output -> shutdown -> return 0)
        -> pre-main -> main() -> shutdown -> return status

Subclasses only supply :meth:`~Command.main` and, optionally, the
:meth:`~Command.constructed` and :meth:`~Command.add_options` hooks.

Example::

    class Greet(Command):
        def add_options(self) -> None:
            self.add_option(Option("n", True, "Who to greet.", "name", default="world"))

        def main(self) -> int:
            print(f"Hello, {self.option('name')}!")
            return 0

    if __name__ == "__main__":
        run_command(Greet())
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Optional, final

from cmdscaffold.exit_codes import EXIT_SUCCESS
from cmdscaffold.observe.base import LifecycleEvent, Listener
from cmdscaffold.observe.host import EventHost
from cmdscaffold.options import Option, OptionCollection, format_identifier
from cmdscaffold.output import debug, print_usage
from cmdscaffold.parser import ArgumentParser

logger = logging.getLogger(__name__)

HELP_OPTION_NAME = "h"
HELP_OPTION_ALIAS = "help"


class Command(ABC):
    """Base class for a single-entry-point command.

    The constructor resolves its collaborators, defaulting any that are not
    supplied, then calls the :meth:`constructed` hook and fires
    ``constructed``.

    Args:
        parser: Tokenizer for the raw argument list.
        options: Registry the command's options are declared in.
        event_host: Dispatcher for lifecycle events.
    """

    def __init__(
        self,
        parser: Optional[ArgumentParser] = None,
        options: Optional[OptionCollection] = None,
        event_host: Optional[EventHost] = None,
    ) -> None:
        self._parser = parser if parser is not None else ArgumentParser()
        self._options = options if options is not None else OptionCollection()
        self._event_host = event_host if event_host is not None else EventHost()

        # Options declared by the current run, withdrawn before the next one.
        self._run_options: list[Option] = []
        self._declaring = False

        self.constructed()
        self.notify(LifecycleEvent.CONSTRUCTED)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def main(self) -> int:
        """Body of the command.

        Returns:
            Process status code, ``0`` for success.
        """
        ...

    def constructed(self) -> None:
        """Called once at the end of construction, e.g. to attach listeners."""

    def add_options(self) -> None:
        """Called at the start of every run to declare the command's options.

        Options added here are withdrawn again before the next run declares
        its own. Options added from :meth:`constructed` or passed in with the
        collection are kept for the life of the command.
        """

    def provide_flat_options(self) -> Sequence[str]:
        """Return the raw argument list, script path first.

        Reads :data:`sys.argv`. Override to supply a fixed list.
        """
        return sys.argv

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    @final
    def run(self) -> int:
        """Run the command.

        Returns:
            The status returned by :meth:`main`, or ``0`` when usage was
            printed instead.
        """
        self.notify(LifecycleEvent.RUN)

        self._declare_options()

        self.notify(LifecycleEvent.OPTIONS_ADDED)

        self._populate_options()

        self.notify(LifecycleEvent.OPTIONS_AVAILABLE, {"options": self._options.values()})

        if self.option(HELP_OPTION_ALIAS):
            return self._print_help()

        self.notify(LifecycleEvent.PRE_MAIN)

        status = self.main()
        logger.debug("%s.main returned %r", type(self).__name__, status)

        self.notify(LifecycleEvent.SHUTDOWN, {"status": status})

        return status

    # ------------------------------------------------------------------
    # Facades
    # ------------------------------------------------------------------

    @final
    def add_option(self, option: Option) -> None:
        """Register *option* with the command's collection.

        Raises:
            DuplicateOptionError: If its name or an alias is already taken.
        """
        self._options.add(option)
        if self._declaring:
            self._run_options.append(option)

    @final
    def option(self, query: str) -> Any:
        """Return the value of the option named or aliased *query*.

        Raises:
            OptionNotFoundError: If no option carries *query*.
        """
        return self._options.find(query).value

    @final
    def notify(self, name: str, data: Optional[dict[str, Any]] = None) -> None:
        """Send an event to every attached listener."""
        self._event_host.notify(name, data)

    @final
    def attach(self, listener: Listener) -> None:
        """Attach a lifecycle listener."""
        self._event_host.attach(listener)

    @final
    def detach(self, listener: Listener) -> None:
        """Detach a lifecycle listener."""
        self._event_host.detach(listener)

    @property
    def script_name(self) -> str:
        """Script name from the current run's parse."""
        return self._parser.script_name

    def usage(self) -> tuple[str, list[tuple[str, str]]]:
        """Return the usage header and ``(signature, description)`` rows."""
        header = f"Usage: [options] {self.script_name}"
        rows = [(option.signature, option.description) for option in self._options]
        return header, rows

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _declare_options(self) -> None:
        for option in self._run_options:
            self._options.remove(option)
        self._run_options = []

        self._declaring = True
        try:
            self.add_options()
            self.add_option(
                Option(HELP_OPTION_NAME, False, "Prints this usage information.", HELP_OPTION_ALIAS)
            )
        finally:
            self._declaring = False

    def _populate_options(self) -> None:
        # Injected and constructed options outlive a run; their values do not.
        for option in self._options:
            option.reset()

        parsed = self._parser.parse_input(self.provide_flat_options())
        for identifier, value in parsed.options.items():
            if not self._options.set_value_if_exists(identifier, value):
                debug(f"Ignoring unrecognised option '{format_identifier(identifier)}'")

    def _print_help(self) -> int:
        header, rows = self.usage()
        print_usage(header, rows)

        self.notify(LifecycleEvent.OUTPUT)
        self.notify(LifecycleEvent.SHUTDOWN, {"status": EXIT_SUCCESS})

        return EXIT_SUCCESS
