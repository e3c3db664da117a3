"""cmdscaffold -- a small base class for single-entry-point command-line tools.

A command subclasses :class:`Command`, declares its options in
``add_options()`` and implements ``main()``. The base class parses the
argument list, resolves option names and aliases, answers ``-h``/``--help``
with generated usage text, and fires lifecycle events to attached listeners.

Typical usage::

    from cmdscaffold import Command, Option, run_command

    class Greet(Command):
        def add_options(self) -> None:
            self.add_option(Option("n", True, "Who to greet.", "name", default="world"))

        def main(self) -> int:
            print(f"Hello, {self.option('name')}!")
            return 0

    run_command(Greet())

Modules:
    command: The :class:`Command` template-method base class.
    options: :class:`Option` descriptors and :class:`OptionCollection`.
    parser: Raw token parsing into option identifiers and values.
    observe: Lifecycle events, listeners, and entry-point discovery.
    app: Process entry boundary mapping results and errors to exit codes.
    config: Environment configuration and XDG data paths.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr output system with Rich support.
"""

from cmdscaffold.app import run_command
from cmdscaffold.command import Command
from cmdscaffold.observe import Event, EventHost, LifecycleEvent, Listener
from cmdscaffold.options import Option, OptionCollection
from cmdscaffold.parser import ArgumentParser, ParsedArguments

__version__ = "0.1.0"

__all__ = [
    "ArgumentParser",
    "Command",
    "Event",
    "EventHost",
    "LifecycleEvent",
    "Listener",
    "Option",
    "OptionCollection",
    "ParsedArguments",
    "run_command",
]
