"""Event subscription commands.

These keep the connection open and print every pushed event until the
process is interrupted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from .base import Command, SessionOutcome

__all__ = [
    "EventSubscription",
    "EventsHotkeyTriggered",
    "EventsModelLoaded",
    "EventsTest",
    "EventsTrackingStatus",
]


@dataclass(frozen=True)
class EventSubscription(Command):
    """Base class for commands that subscribe to one server event."""

    outcome: ClassVar[SessionOutcome] = SessionOutcome.SUBSCRIPTION
    event_name: ClassVar[str] = ""

    def event_config(self) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class EventsTest(EventSubscription):
    event_name: ClassVar[str] = "TestEvent"

    message: str = "Hello from vts"

    def event_config(self) -> Dict[str, Any]:
        return {"testMessageForEvent": self.message}


@dataclass(frozen=True)
class EventsModelLoaded(EventSubscription):
    event_name: ClassVar[str] = "ModelLoadedEvent"

    model_ids: Tuple[str, ...] = ()

    def event_config(self) -> Dict[str, Any]:
        if not self.model_ids:
            return {}
        return {"modelID": list(self.model_ids)}


@dataclass(frozen=True)
class EventsTrackingStatus(EventSubscription):
    event_name: ClassVar[str] = "TrackingStatusChangedEvent"


@dataclass(frozen=True)
class EventsHotkeyTriggered(EventSubscription):
    event_name: ClassVar[str] = "HotkeyTriggeredEvent"

    action: Optional[str] = None

    def event_config(self) -> Dict[str, Any]:
        if not self.action:
            return {}
        return {"onlyForAction": self.action}
