"""Pydantic configuration models for cmdscaffold.

The models describe the ambient behaviour of a command run (how output is
rendered and which lifecycle listeners are loaded), not the options of any
particular command. They are built by :func:`cmdscaffold.config.resolve_config`
from environment variables.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """Output preferences applied to the global output manager."""

    format: Literal["auto", "plain", "rich"] = Field(
        default="auto", description="Output mode; auto picks rich on a TTY"
    )
    no_color: bool = Field(default=False, description="Disable colour and markup")
    verbose: bool = Field(default=False, description="Show debug messages and logs")


class ListenersConfig(BaseModel):
    """Allowlist/blocklist for entry-point listener discovery."""

    enabled: list[str] = Field(default_factory=list)
    disabled: list[str] = Field(default_factory=list)


class ScaffoldConfig(BaseModel):
    """Effective configuration for a command run.

    Example::

        ScaffoldConfig(output=OutputConfig(format="plain", verbose=True))
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    listeners: ListenersConfig = Field(default_factory=ListenersConfig)
