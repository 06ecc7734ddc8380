"""Command router: turns one Command into API requests and printed output."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional, Type

from ..commands import Command
from ..config.models import ConnectionConfig
from ..exceptions import UnhandledCommand
from ..output import Printer
from . import artmeshes, basic, events, hotkeys, items, models, params, physics
from .context import RouterContext, Sleep

if TYPE_CHECKING:
    from ..rpc.client import RpcClient

__all__ = ["CommandRouter", "HANDLERS", "Handler"]

logger = logging.getLogger(__name__)

Handler = Callable[[RouterContext, Any], Awaitable[None]]


def _build_registry() -> Dict[Type[Command], Handler]:
    registry: Dict[Type[Command], Handler] = {}
    for module in (basic, params, hotkeys, artmeshes, models, physics, items, events):
        for command_type, handler in module.HANDLERS.items():
            if command_type in registry:
                raise RuntimeError(f"duplicate handler for {command_type.__name__}")
            registry[command_type] = handler
    return registry


HANDLERS: Dict[Type[Command], Handler] = _build_registry()


class CommandRouter:
    """Dispatches a command to its handler with a shared context."""

    def __init__(
        self,
        client: "RpcClient",
        printer: Printer,
        *,
        config: ConnectionConfig,
        config_path: Optional[Path] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.context = RouterContext(
            client=client,
            printer=printer,
            config=config,
            config_path=config_path,
            sleep=sleep,
        )

    async def dispatch(self, command: Command) -> None:
        handler = HANDLERS.get(type(command))
        if handler is None:
            raise UnhandledCommand(f"no handler for {type(command).__name__}")
        logger.debug("Dispatching %s", type(command).__name__)
        await handler(self.context, command)
