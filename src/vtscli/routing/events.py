"""Handlers that subscribe to server events.

Only the subscription request is sent here; the session orchestrator keeps
the connection open and prints pushed events as they arrive.
"""

from __future__ import annotations

import logging

from ..commands import (
    EventSubscription,
    EventsHotkeyTriggered,
    EventsModelLoaded,
    EventsTest,
    EventsTrackingStatus,
)
from .context import RouterContext

__all__ = ["HANDLERS"]

logger = logging.getLogger(__name__)


async def _subscribe(ctx: RouterContext, command: EventSubscription) -> None:
    await ctx.send(
        "EventSubscriptionRequest",
        {
            "eventName": command.event_name,
            "subscribe": True,
            "config": command.event_config(),
        },
    )
    logger.info("Subscribed to %s; press Ctrl-C to stop", command.event_name)


HANDLERS = {
    EventsTest: _subscribe,
    EventsModelLoaded: _subscribe,
    EventsTrackingStatus: _subscribe,
    EventsHotkeyTriggered: _subscribe,
}
