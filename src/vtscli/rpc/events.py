"""Items pushed on the client's event stream, and the stream itself."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Optional, Union

__all__ = [
    "ApiEvent",
    "ClientEvent",
    "Disconnected",
    "EventStream",
    "TokenRotated",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenRotated:
    """The server issued a new authentication token."""

    token: str = field(repr=False)


@dataclass(frozen=True)
class ApiEvent:
    """An application event pushed by the server (e.g. ``TestEvent``)."""

    event_type: str
    data: Dict[str, Any]
    timestamp: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for JSON output."""
        result: Dict[str, Any] = {"type": self.event_type, "data": self.data}
        if self.timestamp is not None:
            result["timestamp"] = self.timestamp
        return result


@dataclass(frozen=True)
class Disconnected:
    """The underlying connection closed."""

    reason: str = ""


ClientEvent = Union[TokenRotated, ApiEvent, Disconnected]

_END = object()


class EventStream:
    """Ordered, explicitly closable channel of ``ClientEvent`` items.

    The producer side is the RPC client (``push``/``close``); the consumer
    polls ``next()`` until it returns ``None``. Items pushed after
    ``close()`` are dropped.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        self._finished = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, event: ClientEvent) -> None:
        if self._closed:
            logger.debug("Dropping %s pushed after stream close", type(event).__name__)
            return
        self._queue.put_nowait(event)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_END)

    async def next(self) -> Optional[ClientEvent]:
        """Wait for the next item; ``None`` once the stream has ended."""
        if self._finished:
            return None
        item = await self._queue.get()
        if item is _END:
            self._finished = True
            return None
        return item

    def drain_nowait(self) -> List[ClientEvent]:
        """Remove and return the items already queued, without waiting."""
        items: List[ClientEvent] = []
        while not self._finished:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                break
            if item is _END:
                self._finished = True
                break
            items.append(item)
        return items

    def __aiter__(self) -> AsyncIterator[ClientEvent]:
        return self

    async def __anext__(self) -> ClientEvent:
        item = await self.next()
        if item is None:
            raise StopAsyncIteration
        return item
