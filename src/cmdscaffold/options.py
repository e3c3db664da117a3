"""Option descriptors and the ordered registry that resolves them.

An :class:`Option` declares one command-line flag: a canonical name, any
number of aliases, whether it consumes a value, and a description for the
usage text. Identifiers are stored without dash prefixes; ``-o`` and
``--output`` on the command line resolve to the identifiers ``o`` and
``output``.

:class:`OptionCollection` keeps options in declaration order (for usage
rendering) alongside an identifier index, so lookups by name or alias are a
single dict access.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Optional, Union

from cmdscaffold.exceptions import DuplicateOptionError, OptionError, OptionNotFoundError

logger = logging.getLogger(__name__)

VALUE_PLACEHOLDER = "<value>"


def format_identifier(identifier: str) -> str:
    """Return the command-line spelling of *identifier* (``-x`` or ``--name``)."""
    if len(identifier) == 1:
        return f"-{identifier}"
    return f"--{identifier}"


class Option:
    """A single declared command-line option.

    Args:
        name: Canonical identifier, without dashes.
        requires_value: When ``True`` the option takes the following token
            as its value; when ``False`` its presence sets ``True``.
        description: Text shown in the usage output.
        aliases: One alias or an iterable of aliases, without dashes.
        default: Value reported until the option is populated. Flags that do
            not require a value default to ``False``.

    Example::

        Option("o", requires_value=True, description="Output file", aliases="output")
    """

    def __init__(
        self,
        name: str,
        requires_value: bool = False,
        description: str = "",
        aliases: Union[str, Iterable[str]] = (),
        default: Any = None,
    ) -> None:
        if isinstance(aliases, str):
            aliases = (aliases,)
        self.name = _check_identifier(name)
        self.aliases: tuple[str, ...] = tuple(_check_identifier(a) for a in aliases)
        self.requires_value = requires_value
        self.description = description
        if default is None and not requires_value:
            default = False
        self.default = default
        self._value: Any = default
        self._is_set = False

    @property
    def identifiers(self) -> tuple[str, ...]:
        """The name followed by every alias."""
        return (self.name, *self.aliases)

    @property
    def value(self) -> Any:
        """The resolved value, or :attr:`default` while unset."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value
        self._is_set = True

    @property
    def is_set(self) -> bool:
        """Whether a value has been assigned since construction or :meth:`reset`."""
        return self._is_set

    def reset(self) -> None:
        """Restore the default value."""
        self._value = self.default
        self._is_set = False

    @property
    def signature(self) -> str:
        """Display form of the identifiers, e.g. ``-o, --output <value>``."""
        text = ", ".join(format_identifier(i) for i in self.identifiers)
        if self.requires_value:
            text = f"{text} {VALUE_PLACEHOLDER}"
        return text

    def __str__(self) -> str:
        return f"{self.signature}  {self.description}".rstrip()

    def __repr__(self) -> str:
        return (
            f"Option(name={self.name!r}, aliases={self.aliases!r}, "
            f"requires_value={self.requires_value!r}, value={self._value!r})"
        )


def _check_identifier(identifier: str) -> str:
    if not identifier or identifier.startswith("-"):
        raise OptionError(
            f"Invalid option identifier '{identifier}': "
            "identifiers are non-empty and given without leading dashes"
        )
    return identifier


class OptionCollection:
    """Ordered registry of :class:`Option` objects.

    Iteration yields options in the order they were added. Every name and
    alias maps to exactly one option; :meth:`add` refuses collisions and
    leaves the collection untouched when it does.
    """

    def __init__(self, options: Optional[Iterable[Option]] = None) -> None:
        self._options: list[Option] = []
        self._index: dict[str, Option] = {}
        for option in options or ():
            self.add(option)

    def add(self, option: Option) -> None:
        """Register *option*.

        Raises:
            DuplicateOptionError: If the option's name or any alias is
                already registered, or repeats within the option itself.
        """
        seen: set[str] = set()
        for identifier in option.identifiers:
            if identifier in self._index or identifier in seen:
                raise DuplicateOptionError(identifier)
            seen.add(identifier)

        self._options.append(option)
        for identifier in option.identifiers:
            self._index[identifier] = option
        logger.debug("Registered option %s", option.signature)

    def find(self, query: str) -> Option:
        """Return the option whose name or alias equals *query*.

        Raises:
            OptionNotFoundError: If no registered option carries *query*.
        """
        try:
            return self._index[query]
        except KeyError:
            raise OptionNotFoundError(query) from None

    def set_value_if_exists(self, name: str, value: Any) -> bool:
        """Assign *value* to the option matching *name*, if there is one.

        Identifiers that match no option are ignored so that a mistyped flag
        never blocks the rest of the command.

        Returns:
            ``True`` if an option was updated, ``False`` otherwise.
        """
        option = self._index.get(name)
        if option is None:
            return False
        option.value = value
        return True

    def remove(self, option: Option) -> None:
        """Unregister *option* and free its identifiers.

        Raises:
            OptionNotFoundError: If *option* is not registered here.
        """
        if self._index.get(option.name) is not option:
            raise OptionNotFoundError(option.name)
        self._options.remove(option)
        for identifier in option.identifiers:
            del self._index[identifier]

    def values(self) -> dict[str, Any]:
        """Return a ``{name: value}`` mapping in declaration order."""
        return {option.name: option.value for option in self._options}

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index
