"""Commands that manage this program's own config file."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.models import ConnectionConfig
from .base import Command

__all__ = ["ConfigInit", "ConfigPath", "ConfigShow"]


@dataclass(frozen=True)
class ConfigInit(Command):
    """Request plugin permissions and create the config file."""

    config: ConnectionConfig = field(default_factory=ConnectionConfig)


@dataclass(frozen=True)
class ConfigShow(Command):
    """Print the config file contents."""

    show_token: bool = False


@dataclass(frozen=True)
class ConfigPath(Command):
    """Print the config file path."""
