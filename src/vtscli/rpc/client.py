"""
WebSocket RPC client for the VTube Studio public API.

Owns one connection, correlates responses to requests by ``requestID``,
authenticates lazily before the first request, and pushes token rotations
and server events onto an ``EventStream``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from ..config.models import ConnectionConfig
from ..exceptions import AuthenticationError, TransportError
from .events import ApiEvent, Disconnected, EventStream, TokenRotated
from .protocol import (
    build_request,
    decode_message,
    encode_message,
    is_event,
    raise_for_error,
)

__all__ = ["RpcClient"]

logger = logging.getLogger(__name__)

_AUTH_TOKEN_REQUEST = "AuthenticationTokenRequest"
_AUTH_REQUEST = "AuthenticationRequest"
_MAX_MESSAGE_SIZE = 16 * 1024 * 1024


class RpcClient:
    """Request/response client with a server-pushed event stream."""

    def __init__(
        self,
        url: str,
        *,
        plugin_name: str,
        plugin_developer: str,
        token: Optional[str] = None,
        connect_timeout: float = 10.0,
    ):
        """
        Initialize the client. No connection is made until the first ``send``.

        Args:
            url: WebSocket URL (e.g. ws://localhost:8001)
            plugin_name: Name shown to the user in the permission pop-up
            plugin_developer: Developer shown in the permission pop-up
            token: Previously issued authentication token, if any
            connect_timeout: Seconds allowed for the WebSocket handshake
        """
        self.url = url
        self.plugin_name = plugin_name
        self.plugin_developer = plugin_developer
        self.connect_timeout = connect_timeout
        self._token = token
        self._authenticated = False
        self._released = False

        self._events = EventStream()
        self._session: Optional[aiohttp.ClientSession] = None
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None
        self._reader_task: Optional[asyncio.Task] = None
        self._pending: Dict[str, asyncio.Future] = {}
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "RpcClient":
        return cls(
            config.url,
            plugin_name=config.plugin_name,
            plugin_developer=config.plugin_developer,
            token=config.token,
        )

    @property
    def events(self) -> EventStream:
        return self._events

    @property
    def connected(self) -> bool:
        return self._ws is not None and not self._ws.closed

    async def send(
        self, message_type: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Send one request and wait for its response ``data``.

        Raises:
            TransportError: the connection failed or closed mid-request.
            ApiError: the server answered with an APIError message.
        """
        async with self._lock:
            await self._connect()
            await self._ensure_authenticated()
            return await self._round_trip(message_type, data)

    async def release(self) -> None:
        """Close the connection; the event stream ends once teardown completes."""
        if self._released:
            return
        self._released = True
        logger.debug("Releasing connection to %s", self.url)
        if self._ws is not None and not self._ws.closed:
            try:
                await self._ws.close()
            except (aiohttp.ClientError, ConnectionError) as exc:
                logger.debug("Error while closing websocket: %s", exc)
        if self._reader_task is not None:
            await self._reader_task
        else:
            self._events.close()
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _connect(self) -> None:
        if self._released:
            raise TransportError("client has been released")
        if self._ws is not None:
            if self._ws.closed:
                raise TransportError(f"connection to {self.url} is closed")
            return

        timeout = aiohttp.ClientTimeout(
            total=None, connect=self.connect_timeout, sock_connect=self.connect_timeout
        )
        self._session = aiohttp.ClientSession(timeout=timeout)
        try:
            self._ws = await self._session.ws_connect(
                self.url, max_msg_size=_MAX_MESSAGE_SIZE
            )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            await self._session.close()
            self._session = None
            self._events.close()
            raise TransportError(f"failed to connect to {self.url}: {exc}") from exc

        logger.debug("Connected to %s", self.url)
        self._reader_task = asyncio.create_task(self._read_loop())

    async def _ensure_authenticated(self) -> None:
        if self._authenticated:
            return

        if self._token and await self._authenticate(self._token):
            self._authenticated = True
            return

        logger.info(
            "Requesting plugin permissions. Please accept the permissions pop-up "
            "in the VTube Studio app."
        )
        data = await self._round_trip(_AUTH_TOKEN_REQUEST, self._identity())
        token = data.get("authenticationToken")
        if not isinstance(token, str) or not token:
            raise TransportError(f"{_AUTH_TOKEN_REQUEST} returned no token")

        if not await self._authenticate(token):
            raise AuthenticationError(
                -1, "newly issued token was rejected", request_type=_AUTH_REQUEST
            )
        self._authenticated = True

    async def _authenticate(self, token: str) -> bool:
        data = self._identity()
        data["authenticationToken"] = token
        resp = await self._round_trip(_AUTH_REQUEST, data)
        ok = bool(resp.get("authenticated"))
        if not ok:
            logger.info("Stored token was not accepted: %s", resp.get("reason", "unknown"))
        return ok

    def _identity(self) -> Dict[str, Any]:
        return {
            "pluginName": self.plugin_name,
            "pluginDeveloper": self.plugin_developer,
        }

    async def _round_trip(
        self, message_type: str, data: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if self._ws is None or self._ws.closed:
            raise TransportError(f"connection to {self.url} is closed")

        message = build_request(message_type, data)
        request_id = message["requestID"]
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future
        try:
            await self._ws.send_str(encode_message(message))
            logger.debug("Sent %s (%s)", message_type, request_id)
            response = await future
        except (aiohttp.ClientError, ConnectionError, RuntimeError) as exc:
            raise TransportError(f"failed to send {message_type}: {exc}") from exc
        finally:
            self._pending.pop(request_id, None)

        raise_for_error(response, message_type)
        return response.get("data") or {}

    async def _read_loop(self) -> None:
        assert self._ws is not None
        reason = "closed"
        try:
            async for msg in self._ws:
                if msg.type == aiohttp.WSMsgType.TEXT:
                    self._dispatch(msg.data)
                elif msg.type == aiohttp.WSMsgType.ERROR:
                    reason = f"error: {self._ws.exception()}"
                    break
        except (aiohttp.ClientError, ConnectionError) as exc:
            reason = f"error: {exc}"
        finally:
            self._fail_pending(TransportError(f"connection to {self.url} {reason}"))
            logger.debug("Connection to %s ended (%s)", self.url, reason)
            self._events.push(Disconnected(reason))
            self._events.close()

    def _dispatch(self, raw: str) -> None:
        try:
            message = decode_message(raw)
        except TransportError as exc:
            logger.warning("Ignoring frame: %s", exc)
            return

        request_id = message.get("requestID")
        future = self._pending.get(request_id) if request_id else None
        if future is not None:
            self._record_issued_token(message)
            if not future.done():
                future.set_result(message)
            return

        if is_event(message):
            self._events.push(
                ApiEvent(
                    event_type=message["messageType"],
                    data=message.get("data") or {},
                    timestamp=message.get("timestamp"),
                )
            )
            return

        logger.debug("Ignoring uncorrelated %s message", message.get("messageType"))

    def _fail_pending(self, error: Exception) -> None:
        for future in self._pending.values():
            if not future.done():
                future.set_exception(error)
        self._pending.clear()

    def _record_issued_token(self, message: Dict[str, Any]) -> None:
        # Queued from the reader, ahead of any Disconnected/close for this frame
        if message.get("messageType") != "AuthenticationTokenResponse":
            return
        token = (message.get("data") or {}).get("authenticationToken")
        if isinstance(token, str) and token:
            self._token = token
            self._events.push(TokenRotated(token))
