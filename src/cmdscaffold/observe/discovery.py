"""Entry-point discovery of lifecycle listeners.

Third-party packages register listeners by declaring an entry point in the
``cmdscaffold.listeners`` group of their ``pyproject.toml``::

    [project.entry-points."cmdscaffold.listeners"]
    audit = "my_package.audit:AuditListener"

Each entry point must load to a no-argument callable (normally a
:class:`~cmdscaffold.observe.base.Listener` subclass) returning a listener.
"""

from __future__ import annotations

import importlib.metadata
import logging

from cmdscaffold.models import ListenersConfig
from cmdscaffold.observe.base import Listener
from cmdscaffold.output import warning

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "cmdscaffold.listeners"
"""The entry-point group name used for listener discovery."""


def discover_listeners(config: ListenersConfig) -> list[tuple[str, Listener]]:
    """Load listeners registered under :data:`ENTRY_POINT_GROUP`.

    The *enabled* and *disabled* lists act as an explicit allowlist and
    blocklist. When *enabled* is non-empty only those names are loaded;
    otherwise every discovered entry point not in *disabled* is loaded.

    Args:
        config: Listener allowlist/blocklist.

    Returns:
        ``(name, listener)`` pairs in discovery order. Entry points that fail
        to load or do not produce a :class:`Listener` are reported as
        warnings on stderr and skipped.
    """
    loaded: list[tuple[str, Listener]] = []
    enabled_set = set(config.enabled)
    disabled_set = set(config.disabled)

    for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
        name = ep.name

        if enabled_set and name not in enabled_set:
            logger.debug("Listener '%s' not in enabled list, skipping", name)
            continue
        if name in disabled_set:
            logger.debug("Listener '%s' is disabled, skipping", name)
            continue

        try:
            factory = ep.load()
            listener = factory()
        except Exception as exc:
            warning(f"Failed to load listener '{name}': {exc}")
            continue

        if not isinstance(listener, Listener):
            warning(f"Entry point '{name}' did not produce a Listener, skipping")
            continue

        loaded.append((name, listener))
        logger.info("Loaded listener '%s'", name)

    return loaded
