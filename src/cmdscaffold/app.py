"""Process entry boundary for cmdscaffold commands.

:func:`run_command` is what a command's ``__main__`` block or console-script
function calls. It installs a signal handler, applies the environment
configuration (output mode, logging, entry-point listeners), runs the
command, and turns the outcome into a process exit code. Unhandled
exceptions are written to a crash log under the data directory.

See Also:
    :mod:`cmdscaffold.config`: Environment configuration resolution.
    :mod:`cmdscaffold.output`: Output manager installed before the run.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, NoReturn

from cmdscaffold.command import Command
from cmdscaffold.exceptions import CmdScaffoldError
from cmdscaffold.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED
from cmdscaffold.models import ScaffoldConfig
from cmdscaffold.output import OutputFormat, OutputManager, debug, error, set_output


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from cmdscaffold.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def configure(command: Command, config: ScaffoldConfig) -> None:
    """Apply *config* before *command* runs.

    Installs the global :class:`~cmdscaffold.output.OutputManager`, routes
    ``cmdscaffold`` log records to stderr in verbose mode, and attaches the
    listeners discovered through entry points.
    """
    from cmdscaffold.observe.discovery import discover_listeners

    set_output(
        OutputManager(
            format=OutputFormat(config.output.format),
            no_color=config.output.no_color,
            verbose=config.output.verbose,
        )
    )

    if config.output.verbose:
        package_logger = logging.getLogger("cmdscaffold")
        if not package_logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
            package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)

    for name, listener in discover_listeners(config.listeners):
        debug(f"Attaching listener '{name}' to {type(command).__name__}")
        command.attach(listener)


def run_command(command: Command) -> NoReturn:
    """Run *command* and exit the process with its status.

    Unhandled :class:`~cmdscaffold.exceptions.CmdScaffoldError` instances
    cause a clean exit with the error's ``exit_code``. All other exceptions
    produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always.
    """
    _setup_signal_handlers()
    try:
        from cmdscaffold.config import resolve_config

        configure(command, resolve_config())
        status = command.run()
        sys.exit(status)
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except CmdScaffoldError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
    except Exception as exc:
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
