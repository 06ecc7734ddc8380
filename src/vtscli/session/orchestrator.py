"""Session orchestrator: one authenticated session per CLI invocation.

Sequence: load config -> build client -> dispatch the command -> release
the connection (transactional commands only) -> drain the event stream,
persisting rotated tokens and printing pushed events -> done.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, TextIO

from ..commands import Command, ConfigInit, ConfigShow
from ..config.models import ConnectionConfig
from ..config.store import load_config, persist_config
from ..exceptions import SessionError, VtsError
from ..output import OutputFormat, Printer
from ..routing import CommandRouter
from ..routing.context import Sleep
from ..rpc.client import RpcClient
from ..rpc.events import ApiEvent, TokenRotated

if TYPE_CHECKING:
    from ..rpc.events import ClientEvent

__all__ = ["ClientFactory", "SessionOrchestrator", "SessionState"]

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ConnectionConfig], RpcClient]


class SessionState(Enum):
    """Lifecycle of one invocation."""

    LOADING = "loading"
    CONNECTING = "connecting"
    DISPATCHING = "dispatching"
    DRAINING = "draining"
    TERMINATED = "terminated"


class SessionOrchestrator:
    """Runs exactly one command against one connection."""

    def __init__(
        self,
        command: Command,
        config_path: Path,
        *,
        fmt: Optional[OutputFormat] = None,
        token_override: Optional[str] = None,
        client_factory: Optional[ClientFactory] = None,
        stream: Optional[TextIO] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Initialize the orchestrator.

        Args:
            command: The parsed command to run
            config_path: Where the config record is loaded from and persisted to
            fmt: Output format; forced compact for subscription commands
            token_override: Token from the environment, replacing the stored one
            client_factory: Builds the RPC client from the loaded config
            stream: Output stream for responses and events (default stdout)
            sleep: Delay function used by commands that wait (tint)
        """
        self.command = command
        self.config_path = Path(config_path)
        fmt = fmt or OutputFormat()
        if command.is_subscription:
            fmt = fmt.for_subscription()
        self.printer = Printer(fmt, stream)
        self.token_override = token_override
        self.client_factory: ClientFactory = client_factory or RpcClient.from_config
        self.sleep = sleep

        self.state = SessionState.LOADING
        self.config: Optional[ConnectionConfig] = None
        self.client: Optional[RpcClient] = None
        self._released = False
        self._persisted = False

    async def run(self) -> None:
        """Run the whole session.

        Raises:
            SessionError: naming the stage that failed, chained to the cause.
        """
        self._enter(SessionState.LOADING)
        try:
            self.config = self._load()
        except VtsError as exc:
            raise SessionError(SessionState.LOADING.value, exc) from exc

        self._enter(SessionState.CONNECTING)
        try:
            self.client = self.client_factory(self.config)
        except VtsError as exc:
            raise SessionError(SessionState.CONNECTING.value, exc) from exc

        try:
            await self._dispatch()
            if not self.command.is_subscription:
                await self._release()
            self._enter(SessionState.DRAINING)
            try:
                await self._drain()
                if isinstance(self.command, ConfigInit) and not self._persisted:
                    self._persist()
            except VtsError as exc:
                raise SessionError(SessionState.DRAINING.value, exc) from exc
        except (asyncio.CancelledError, KeyboardInterrupt):
            self._save_queued_rotations()
            raise
        finally:
            # Subscriptions reach this only once the stream ended or on interrupt
            await self._release()

        self._enter(SessionState.TERMINATED)

    def _enter(self, state: SessionState) -> None:
        logger.debug("Session state %s -> %s", self.state.value, state.value)
        self.state = state

    def _load(self) -> ConnectionConfig:
        if isinstance(self.command, ConfigInit):
            config = dataclasses.replace(self.command.config)
            if not config.token and self.token_override:
                config.token = self.token_override
            return config

        config = load_config(self.config_path)
        # config show reports the file as stored, never the environment token
        if self.token_override and not isinstance(self.command, ConfigShow):
            config.token = self.token_override
        return config

    async def _dispatch(self) -> None:
        assert self.client is not None and self.config is not None
        self._enter(SessionState.DISPATCHING)
        router = CommandRouter(
            self.client,
            self.printer,
            config=self.config,
            config_path=self.config_path,
            sleep=self.sleep,
        )
        try:
            await router.dispatch(self.command)
        except VtsError as exc:
            await self._release()
            # A token issued before the failure must still reach the disk
            try:
                await self._drain()
            except VtsError as drain_exc:
                logger.error("Failed to save rotated token: %s", drain_exc)
            raise SessionError(SessionState.DISPATCHING.value, exc) from exc

    async def _release(self) -> None:
        if self._released or self.client is None:
            return
        self._released = True
        logger.debug("Releasing connection")
        await self.client.release()

    async def _drain(self) -> None:
        assert self.client is not None
        while True:
            event = await self.client.events.next()
            if event is None:
                return
            self._handle_event(event)

    def _handle_event(self, event: "ClientEvent") -> None:
        if isinstance(event, TokenRotated):
            assert self.config is not None
            self.config.token = event.token
            self._persist()
        elif isinstance(event, ApiEvent):
            self.printer.print(event)
        else:
            logger.debug("Ignoring client event %r", event)

    def _save_queued_rotations(self) -> None:
        # Interrupted: nothing more will be polled, but queued tokens must not be lost
        assert self.client is not None
        for event in self.client.events.drain_nowait():
            if not isinstance(event, TokenRotated):
                continue
            try:
                self._handle_event(event)
            except VtsError as exc:
                logger.error("Failed to save rotated token: %s", exc)

    def _persist(self) -> None:
        assert self.config is not None
        persist_config(self.config_path, self.config)
        self._persisted = True
        logger.info("Saved config to %s", self.config_path)
