"""Building blocks shared by every command variant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

__all__ = [
    "Color",
    "Command",
    "PhysicsKind",
    "PlayState",
    "Selector",
    "SessionOutcome",
    "StopFrames",
]


class SessionOutcome(Enum):
    """How long a command needs the connection."""

    TRANSACTIONAL = "transactional"
    SUBSCRIPTION = "subscription"


@dataclass(frozen=True)
class Command:
    """Base class for every user intent; exactly one runs per invocation."""

    outcome: ClassVar[SessionOutcome] = SessionOutcome.TRANSACTIONAL

    @property
    def is_subscription(self) -> bool:
        return self.outcome is SessionOutcome.SUBSCRIPTION


@dataclass(frozen=True)
class Selector:
    """Target a resource either by id or by display name (never both)."""

    id: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255


class PhysicsKind(Enum):
    STRENGTH = "strength"
    WIND = "wind"


class PlayState(Enum):
    """Animation play state requested by ``items animation``."""

    UNCHANGED = "unchanged"
    PLAY = "play"
    STOP = "stop"

    @classmethod
    def from_flags(cls, play: bool, stop: bool) -> "PlayState":
        if play and stop:
            raise ValueError("--play and --stop are mutually exclusive")
        if play:
            return cls.PLAY
        if stop:
            return cls.STOP
        return cls.UNCHANGED


@dataclass(frozen=True)
class StopFrames:
    """Auto-stop frames for ``items animation``.

    ``reset`` clears the frames; a non-empty ``frames`` replaces them; the
    default leaves them untouched.
    """

    frames: Tuple[int, ...] = ()
    reset: bool = False

    def __post_init__(self) -> None:
        if self.reset and self.frames:
            raise ValueError("stop frames cannot be both reset and set")

    @property
    def changed(self) -> bool:
        return self.reset or bool(self.frames)
