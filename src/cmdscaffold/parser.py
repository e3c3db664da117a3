"""Tokenizer that turns an ``argv``-style list into named option values.

The parser knows nothing about declared options. It applies one rule to the
raw tokens and leaves it to :class:`~cmdscaffold.options.OptionCollection`
to decide which identifiers mean anything:

* Token 0 is the invoked script; its basename becomes the script name.
* A token starting with ``-`` (and not made only of dashes) is a flag. Its
  identifier is the token with the leading dashes stripped.
* If the next token is not itself a flag, it is consumed as the flag's value.
  Otherwise, or at the end of input, the flag is recorded as ``True``.
* ``--name=value`` assigns ``value`` without looking at the next token.
* Any other token is ignored; positional arguments are not supported.

Repeated identifiers overwrite earlier ones.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from cmdscaffold.exceptions import ArgumentsNotParsedError

logger = logging.getLogger(__name__)

FLAG_MARKER = "-"

OptionValue = Union[str, bool]


@dataclass
class ParsedArguments:
    """Result of one :meth:`ArgumentParser.parse_input` call.

    Attributes:
        script_name: Basename of the invoked script (``""`` for empty input).
        options: Identifier to raw value, in the order first seen.
    """

    script_name: str = ""
    options: dict[str, OptionValue] = field(default_factory=dict)


def is_flag(token: str) -> bool:
    """Return ``True`` if *token* introduces an option.

    A lone ``-`` (commonly meaning stdin) and ``--`` are plain values.
    """
    return token.startswith(FLAG_MARKER) and token.strip(FLAG_MARKER) != ""


class ArgumentParser:
    """Parses raw tokens and keeps the most recent result.

    Reading :attr:`script_name` or :attr:`options` before
    :meth:`parse_input` has been called raises
    :class:`~cmdscaffold.exceptions.ArgumentsNotParsedError`.
    """

    def __init__(self) -> None:
        self._parsed: Optional[ParsedArguments] = None

    def parse_input(self, tokens: Sequence[str]) -> ParsedArguments:
        """Parse *tokens* and store the result.

        Args:
            tokens: ``argv``-style sequence; element 0 is the script path.

        Returns:
            The :class:`ParsedArguments` now held by the parser.
        """
        tokens = list(tokens)
        script_name = os.path.basename(tokens[0]) if tokens else ""
        options: dict[str, OptionValue] = {}

        i = 1
        while i < len(tokens):
            token = tokens[i]
            if not is_flag(token):
                logger.debug("Ignoring positional token '%s'", token)
                i += 1
                continue

            identifier = token.lstrip(FLAG_MARKER)
            if "=" in identifier:
                identifier, _, inline_value = identifier.partition("=")
                options[identifier] = inline_value
                i += 1
                continue

            nxt = tokens[i + 1] if i + 1 < len(tokens) else None
            if nxt is not None and not is_flag(nxt):
                options[identifier] = nxt
                i += 2
            else:
                options[identifier] = True
                i += 1

        self._parsed = ParsedArguments(script_name=script_name, options=options)
        logger.debug("Parsed %s: %r", script_name or "<no script>", options)
        return self._parsed

    def _require_parsed(self) -> ParsedArguments:
        if self._parsed is None:
            raise ArgumentsNotParsedError("No input has been parsed yet; call parse_input() first")
        return self._parsed

    @property
    def script_name(self) -> str:
        """Script name from the last parse."""
        return self._require_parsed().script_name

    @property
    def options(self) -> dict[str, OptionValue]:
        """Copy of the identifier/value mapping from the last parse."""
        return dict(self._require_parsed().options)

    def get_script_name(self) -> str:
        return self.script_name

    def get_options(self) -> dict[str, OptionValue]:
        return self.options
