"""Commands acting on the loaded model: parameters, hotkeys, art meshes,
models, expressions and physics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .base import Color, Command, PhysicsKind, Selector

__all__ = [
    "ArtmeshesList",
    "ArtmeshesSelect",
    "ArtmeshesTint",
    "ExpressionsActivate",
    "ExpressionsDeactivate",
    "ExpressionsList",
    "HotkeysList",
    "HotkeysTrigger",
    "ModelsCurrent",
    "ModelsList",
    "ModelsLoad",
    "ModelsMove",
    "ParamsCreate",
    "ParamsDelete",
    "ParamsGet",
    "ParamsInject",
    "ParamsListInputs",
    "ParamsListLive2D",
    "PhysicsGet",
    "PhysicsSetBase",
    "PhysicsSetMultiplier",
]


# Parameters


@dataclass(frozen=True)
class ParamsGet(Command):
    name: str


@dataclass(frozen=True)
class ParamsCreate(Command):
    name: str
    default: float = 0.0
    min: float = 0.0
    max: float = 100.0
    explanation: Optional[str] = None


@dataclass(frozen=True)
class ParamsInject(Command):
    """Temporarily set a parameter; the app resets it after ~1s without updates."""

    id: str
    value: float
    weight: Optional[float] = None
    face_found: bool = False
    add: bool = False


@dataclass(frozen=True)
class ParamsDelete(Command):
    name: str


@dataclass(frozen=True)
class ParamsListInputs(Command):
    pass


@dataclass(frozen=True)
class ParamsListLive2D(Command):
    pass


# Hotkeys


@dataclass(frozen=True)
class HotkeysList(Command):
    model_id: Optional[str] = None
    live2d_file: Optional[str] = None


@dataclass(frozen=True)
class HotkeysTrigger(Command):
    selector: Selector = field(default_factory=Selector)
    item: Optional[str] = None


# Art meshes


@dataclass(frozen=True)
class ArtmeshesList(Command):
    pass


@dataclass(frozen=True)
class ArtmeshesTint(Command):
    """Tint matching art meshes.

    ``duration`` is how long to stay connected after a successful tint, since
    the app drops the tint as soon as the plugin disconnects.
    """

    duration: float
    color: Color = field(default_factory=Color)
    rainbow: bool = False
    mix_scene_lighting: Optional[float] = None
    all: bool = False
    art_mesh_number: Tuple[int, ...] = ()
    name_exact: Tuple[str, ...] = ()
    name_contains: Tuple[str, ...] = ()
    tag_exact: Tuple[str, ...] = ()
    tag_contains: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ArtmeshesSelect(Command):
    set_text: Optional[str] = None
    set_help: Optional[str] = None
    count: Optional[int] = None
    preselect: Tuple[str, ...] = ()


# Models


@dataclass(frozen=True)
class ModelsList(Command):
    pass


@dataclass(frozen=True)
class ModelsCurrent(Command):
    pass


@dataclass(frozen=True)
class ModelsLoad(Command):
    selector: Selector = field(default_factory=Selector)


@dataclass(frozen=True)
class ModelsMove(Command):
    duration: float = 0.0
    relative: bool = False
    x: Optional[float] = None
    y: Optional[float] = None
    rotation: Optional[float] = None
    size: Optional[float] = None


# Expressions


@dataclass(frozen=True)
class ExpressionsList(Command):
    details: bool = False
    file: Optional[str] = None


@dataclass(frozen=True)
class ExpressionsActivate(Command):
    file: str


@dataclass(frozen=True)
class ExpressionsDeactivate(Command):
    file: str


# Physics


@dataclass(frozen=True)
class PhysicsGet(Command):
    pass


@dataclass(frozen=True)
class PhysicsSetBase(Command):
    """Override the base strength or wind value (0 to 100)."""

    kind: PhysicsKind
    value: float
    duration: float = 0.5


@dataclass(frozen=True)
class PhysicsSetMultiplier(Command):
    """Override the strength or wind multiplier (0 to 2) of one physics group."""

    kind: PhysicsKind
    value: float
    group_id: str
    duration: float = 0.5
