"""Commands acting on scene items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .base import Command, PlayState, StopFrames

__all__ = [
    "ItemsAnimation",
    "ItemsList",
    "ItemsLoad",
    "ItemsMove",
    "ItemsUnload",
]


@dataclass(frozen=True)
class ItemsList(Command):
    spots: bool = False
    instances: bool = False
    files: bool = False
    with_file_name: Optional[str] = None
    with_instance_id: Optional[str] = None


@dataclass(frozen=True)
class ItemsLoad(Command):
    file_name: str
    x: float = 0.0
    y: float = 0.5
    size: float = 0.32
    rotation: float = 0.0
    fade_time: float = 0.5
    order: int = 1
    fail_if_order_taken: bool = False
    smoothing: float = 0.0
    censored: bool = False
    flipped: bool = False
    locked: bool = False


@dataclass(frozen=True)
class ItemsUnload(Command):
    all: bool = False
    from_this_plugin: bool = False
    from_other_plugins: bool = False
    ids: Tuple[str, ...] = ()
    files: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ItemsMove(Command):
    id: str
    duration: float = 0.0
    fade_mode: str = "linear"
    x: Optional[float] = None
    y: Optional[float] = None
    size: Optional[float] = None
    rotation: Optional[float] = None
    order: Optional[int] = None
    set_flip: bool = False
    flip: bool = False
    user_can_stop: bool = False


@dataclass(frozen=True)
class ItemsAnimation(Command):
    item_instance_id: str
    framerate: Optional[float] = None
    frame: Optional[int] = None
    brightness: Optional[float] = None
    opacity: Optional[float] = None
    play_state: PlayState = PlayState.UNCHANGED
    stop_frames: StopFrames = field(default_factory=StopFrames)
