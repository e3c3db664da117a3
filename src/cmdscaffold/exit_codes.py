"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~cmdscaffold.exceptions.CmdScaffoldError` subclass.
A command's own :meth:`~cmdscaffold.command.Command.main` may return any
integer; these constants cover the statuses the framework itself produces.

Example::

    $ my-command --help
    $ echo $?
    0   # EXIT_SUCCESS -- usage was printed
"""

EXIT_SUCCESS = 0
"""The command completed successfully (or printed its usage)."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_DEVELOPER_ERROR = 3
"""The command itself is misdeclared (duplicate option, unknown option lookup)."""

EXIT_CONFIG_ERROR = 4
"""An environment setting could not be interpreted."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C (128 + SIGINT)."""
