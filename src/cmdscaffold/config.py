"""Environment-driven configuration and XDG data paths.

This module resolves the ambient settings of a command run:

* **Settings** -- :func:`resolve_config` reads ``CMDSCAFFOLD_*`` environment
  variables (plus the conventional ``NO_COLOR``) into a
  :class:`~cmdscaffold.models.ScaffoldConfig`. No configuration files are read.
* **Directory layout** -- :func:`get_data_dir` is XDG Base Directory
  compliant on Linux/BSD and falls back to ``~/.cmdscaffold/`` on macOS and
  Windows. It holds crash logs written by :mod:`cmdscaffold.app`.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from cmdscaffold.exceptions import ConfigError
from cmdscaffold.models import ListenersConfig, OutputConfig, ScaffoldConfig

_APP_NAME = "cmdscaffold"
_ENV_PREFIX = "CMDSCAFFOLD_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/cmdscaffold/`` (default
    ``~/.local/share/cmdscaffold/``). On macOS/Windows: ``~/.cmdscaffold/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Environment parsing ---


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    """Interpret ``CMDSCAFFOLD_<name>`` as a boolean switch."""
    key = _ENV_PREFIX + name
    raw = environ.get(key, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be one of 1/0, true/false, yes/no, on/off (got '{raw}')")


def _env_list(environ: Mapping[str, str], name: str) -> list[str]:
    """Split a comma-separated ``CMDSCAFFOLD_<name>`` into trimmed, non-empty items."""
    raw = environ.get(_ENV_PREFIX + name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def resolve_config(environ: Optional[Mapping[str, str]] = None) -> ScaffoldConfig:
    """Build the effective configuration from environment variables.

    Recognised variables:

    * ``CMDSCAFFOLD_OUTPUT`` -- ``auto`` (default), ``plain`` or ``rich``.
    * ``CMDSCAFFOLD_NO_COLOR`` / ``NO_COLOR`` -- disable colour. ``NO_COLOR``
      counts when set to any value, per `no-color.org <https://no-color.org/>`_.
    * ``CMDSCAFFOLD_VERBOSE`` -- boolean switch for debug output.
    * ``CMDSCAFFOLD_LISTENERS_ENABLED``, ``CMDSCAFFOLD_LISTENERS_DISABLED`` --
      comma-separated entry-point names.

    Args:
        environ: Mapping to read from. Defaults to :data:`os.environ`.

    Returns:
        The resolved :class:`~cmdscaffold.models.ScaffoldConfig`.

    Raises:
        ConfigError: If a variable holds a value that cannot be interpreted.
    """
    if environ is None:
        environ = os.environ

    no_color = _env_flag(environ, "NO_COLOR") or environ.get("NO_COLOR") is not None

    try:
        output = OutputConfig(
            format=environ.get(_ENV_PREFIX + "OUTPUT", "auto").strip().lower() or "auto",
            no_color=no_color,
            verbose=_env_flag(environ, "VERBOSE"),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid output settings: {exc}") from exc

    listeners = ListenersConfig(
        enabled=_env_list(environ, "LISTENERS_ENABLED"),
        disabled=_env_list(environ, "LISTENERS_DISABLED"),
    )
    return ScaffoldConfig(output=output, listeners=listeners)
