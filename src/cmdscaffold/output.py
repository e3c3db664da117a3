"""Output formatting system with strict stdout/stderr discipline.

Follows `clig.dev <https://clig.dev/>`_ conventions:

* **stdout** -- primary output only. For a scaffolded command this is the
  usage text printed by ``--help``.
* **stderr** -- all diagnostics (status, warnings, errors, debug).
* **TTY detection** -- Rich formatting when stdout is an interactive
  terminal, plain text when piped to another process.
* **Colour control** -- respects ``NO_COLOR`` and ``TERM=dumb``.

The module exposes two layers:

1. :class:`OutputManager` -- a stateful object holding format preferences,
   Rich consoles, and the verbose flag. Created once in
   :func:`~cmdscaffold.app.run_command` and installed via :func:`set_output`.
2. Module-level convenience functions (:func:`print_usage`, :func:`error`,
   :func:`warning`, :func:`debug`) that delegate to the global ``OutputManager``
   instance so callers do not need to pass the manager around.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    """Enumeration of supported output formats.

    ``AUTO`` resolves to ``RICH`` when stdout is an interactive TTY and colour
    is not disabled, or to ``PLAIN`` otherwise.
    """

    AUTO = "auto"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Central manager for all command output with stdout/stderr discipline.

    Maintains two Rich :class:`~rich.console.Console` instances -- one for
    stdout and one for stderr -- and routes every output call to the correct
    stream with appropriate formatting.

    Args:
        format: Desired output format. ``AUTO`` resolves based on TTY
            detection.
        no_color: Disable all colour and Rich markup.
        verbose: Enable debug-level messages on stderr.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose

        # Resolve format: AUTO picks RICH for interactive TTY, PLAIN otherwise
        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def format(self) -> OutputFormat:
        """The resolved output format."""
        return self._format

    @property
    def is_verbose(self) -> bool:
        """Whether verbose mode is enabled."""
        return self._verbose

    # ------------------------------------------------------------------ #
    # Primary output (stdout)
    # ------------------------------------------------------------------ #

    def print_data(self, text: str) -> None:
        """Print raw text to stdout.

        Args:
            text: The string to write. A trailing newline is appended.
        """
        print(text, file=sys.stdout, flush=True)

    def print_usage(self, header: str, rows: list[tuple[str, str]]) -> None:
        """Print usage text: a header line followed by one line per option.

        * **Rich mode** -- borderless two-column :class:`~rich.table.Table`
          of signatures and descriptions.
        * **Plain mode** -- each row joined by two spaces and indented by one.

        Args:
            header: The ``Usage: ...`` line.
            rows: ``(signature, description)`` pairs in declaration order.
        """
        self.print_data(header)
        self.print_data("")

        if self._format == OutputFormat.RICH:
            table = Table(box=None, show_header=False, pad_edge=True)
            table.add_column(style="bold cyan", no_wrap=True)
            table.add_column()
            for signature, description in rows:
                table.add_row(signature, description)
            self._stdout.print(table)
        else:
            for signature, description in rows:
                self.print_data(f" {signature}  {description}".rstrip())

        self.print_data("")

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        """Print a yellow warning to stderr."""
        self._diagnostic("Warning:", "yellow", message)

    def error(self, message: str) -> None:
        """Print a bold-red error to stderr."""
        self._diagnostic("Error:", "bold red", message)

    def debug(self, message: str) -> None:
        """Print a debug message to stderr. Only shown in verbose mode."""
        if self._verbose:
            self._diagnostic("[debug]", "dim", message)

    def _diagnostic(self, label: str, style: str, message: str) -> None:
        if self._no_color:
            print(f"{label} {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[{style}]{escape(label)}[/{style}] {message}")


# ------------------------------------------------------------------ #
# Module-level helpers
# ------------------------------------------------------------------ #


def _is_tty() -> bool:
    """Check if stdout is a TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """Check if color should be disabled per clig.dev.

    Returns True when NO_COLOR env var is set (any value) or TERM=dumb.
    """
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance (set during command startup)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager` instance.

    If no instance has been installed via :func:`set_output`, a default
    ``OutputManager`` with ``AUTO`` format is created lazily.
    """
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None


# ------------------------------------------------------------------ #
# Convenience functions that use the global instance
# ------------------------------------------------------------------ #


def print_usage(header: str, rows: list[tuple[str, str]]) -> None:
    """Print usage text to stdout via the global OutputManager."""
    get_output().print_usage(header, rows)


def error(message: str) -> None:
    """Print error to stderr via the global OutputManager."""
    get_output().error(message)


def warning(message: str) -> None:
    """Print warning to stderr via the global OutputManager."""
    get_output().warning(message)


def debug(message: str) -> None:
    """Print debug message to stderr via the global OutputManager."""
    get_output().debug(message)
