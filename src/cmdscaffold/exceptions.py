"""Exception hierarchy for cmdscaffold.

All exceptions inherit from :class:`CmdScaffoldError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`cmdscaffold.exit_codes`.
The process boundary in :func:`cmdscaffold.app.run_command` catches
``CmdScaffoldError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Option errors are programming mistakes in the command declaration, never
problems with user input: unknown flags typed by the user are dropped
silently by :meth:`~cmdscaffold.options.OptionCollection.set_value_if_exists`.

Subclass hierarchy::

    CmdScaffoldError (exit 1)
    +-- OptionError               (exit 3)
    |   +-- DuplicateOptionError  (exit 3)
    |   +-- OptionNotFoundError   (exit 3)
    +-- ArgumentsNotParsedError   (exit 3)
    +-- ConfigError               (exit 4)
"""

from cmdscaffold.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_DEVELOPER_ERROR,
    EXIT_GENERIC_FAILURE,
)


class CmdScaffoldError(Exception):
    """Base exception for all cmdscaffold errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`cmdscaffold.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class OptionError(CmdScaffoldError):
    """Base class for errors in the declaration or lookup of options."""

    exit_code = EXIT_DEVELOPER_ERROR


class DuplicateOptionError(OptionError):
    """Raised when an option's name or alias is already registered."""

    def __init__(self, identifier: str):
        super().__init__(f"Option identifier '{identifier}' is already registered")
        self.identifier = identifier


class OptionNotFoundError(OptionError):
    """Raised when looking up an identifier that no registered option carries."""

    def __init__(self, query: str):
        super().__init__(f"No option registered under '{query}'")
        self.query = query


class ArgumentsNotParsedError(CmdScaffoldError):
    """Raised when parse results are read before any input was parsed."""

    exit_code = EXIT_DEVELOPER_ERROR


class ConfigError(CmdScaffoldError):
    """Raised for environment settings that cannot be interpreted."""

    exit_code = EXIT_CONFIG_ERROR
