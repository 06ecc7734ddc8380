"""WebSocket RPC client and its event stream."""

from .client import RpcClient
from .events import ApiEvent, ClientEvent, Disconnected, EventStream, TokenRotated

__all__ = [
    "ApiEvent",
    "ClientEvent",
    "Disconnected",
    "EventStream",
    "RpcClient",
    "TokenRotated",
]
