"""The closed set of commands a single invocation can run.

Every concrete command is a frozen dataclass deriving from ``Command`` and
is listed in ``ALL_COMMANDS``; the router must have a handler for each.
"""

from .base import (
    Color,
    Command,
    PhysicsKind,
    PlayState,
    Selector,
    SessionOutcome,
    StopFrames,
)
from .config import ConfigInit, ConfigPath, ConfigShow
from .events import (
    EventSubscription,
    EventsHotkeyTriggered,
    EventsModelLoaded,
    EventsTest,
    EventsTrackingStatus,
)
from .items import ItemsAnimation, ItemsList, ItemsLoad, ItemsMove, ItemsUnload
from .model import (
    ArtmeshesList,
    ArtmeshesSelect,
    ArtmeshesTint,
    ExpressionsActivate,
    ExpressionsDeactivate,
    ExpressionsList,
    HotkeysList,
    HotkeysTrigger,
    ModelsCurrent,
    ModelsList,
    ModelsLoad,
    ModelsMove,
    ParamsCreate,
    ParamsDelete,
    ParamsGet,
    ParamsInject,
    ParamsListInputs,
    ParamsListLive2D,
    PhysicsGet,
    PhysicsSetBase,
    PhysicsSetMultiplier,
)
from .status import (
    FaceFound,
    Folders,
    NdiGetConfig,
    NdiSetConfig,
    SceneColors,
    State,
    Stats,
)

ALL_COMMANDS = (
    ConfigInit,
    ConfigShow,
    ConfigPath,
    State,
    Stats,
    Folders,
    SceneColors,
    FaceFound,
    ParamsGet,
    ParamsCreate,
    ParamsInject,
    ParamsDelete,
    ParamsListInputs,
    ParamsListLive2D,
    HotkeysList,
    HotkeysTrigger,
    ArtmeshesList,
    ArtmeshesTint,
    ArtmeshesSelect,
    ModelsList,
    ModelsCurrent,
    ModelsLoad,
    ModelsMove,
    ExpressionsList,
    ExpressionsActivate,
    ExpressionsDeactivate,
    NdiGetConfig,
    NdiSetConfig,
    PhysicsGet,
    PhysicsSetBase,
    PhysicsSetMultiplier,
    ItemsList,
    ItemsLoad,
    ItemsUnload,
    ItemsMove,
    ItemsAnimation,
    EventsTest,
    EventsModelLoaded,
    EventsTrackingStatus,
    EventsHotkeyTriggered,
)

__all__ = [
    "ALL_COMMANDS",
    "ArtmeshesList",
    "ArtmeshesSelect",
    "ArtmeshesTint",
    "Color",
    "Command",
    "ConfigInit",
    "ConfigPath",
    "ConfigShow",
    "EventSubscription",
    "EventsHotkeyTriggered",
    "EventsModelLoaded",
    "EventsTest",
    "EventsTrackingStatus",
    "ExpressionsActivate",
    "ExpressionsDeactivate",
    "ExpressionsList",
    "FaceFound",
    "Folders",
    "HotkeysList",
    "HotkeysTrigger",
    "ItemsAnimation",
    "ItemsList",
    "ItemsLoad",
    "ItemsMove",
    "ItemsUnload",
    "ModelsCurrent",
    "ModelsList",
    "ModelsLoad",
    "ModelsMove",
    "NdiGetConfig",
    "NdiSetConfig",
    "ParamsCreate",
    "ParamsDelete",
    "ParamsGet",
    "ParamsInject",
    "ParamsListInputs",
    "ParamsListLive2D",
    "PhysicsGet",
    "PhysicsKind",
    "PhysicsSetBase",
    "PhysicsSetMultiplier",
    "PlayState",
    "SceneColors",
    "Selector",
    "SessionOutcome",
    "State",
    "Stats",
    "StopFrames",
]
