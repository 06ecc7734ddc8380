"""Read-only queries about the app, plus NDI output configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .base import Command

__all__ = [
    "FaceFound",
    "Folders",
    "NdiGetConfig",
    "NdiSetConfig",
    "SceneColors",
    "State",
    "Stats",
]


@dataclass(frozen=True)
class State(Command):
    """Current state of the API."""


@dataclass(frozen=True)
class Stats(Command):
    """App statistics."""


@dataclass(frozen=True)
class Folders(Command):
    """App folder names."""


@dataclass(frozen=True)
class SceneColors(Command):
    """Scene color overlay info."""


@dataclass(frozen=True)
class FaceFound(Command):
    """Whether the tracker currently sees a face."""


@dataclass(frozen=True)
class NdiGetConfig(Command):
    pass


@dataclass(frozen=True)
class NdiSetConfig(Command):
    active: Optional[bool] = None
    use_ndi5: Optional[bool] = None
    use_custom_resolution: Optional[bool] = None
    # Width must be a multiple of 16, height a multiple of 8 (checked server-side)
    width: Optional[int] = None
    height: Optional[int] = None
