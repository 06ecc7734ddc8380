"""State handed to every command handler during dispatch."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from ..config.models import ConnectionConfig
from ..output import Printer

if TYPE_CHECKING:
    from ..rpc.client import RpcClient

__all__ = ["RouterContext", "Sleep"]

Sleep = Callable[[float], Awaitable[Any]]


@dataclass
class RouterContext:
    client: "RpcClient"
    printer: Printer
    config: ConnectionConfig
    config_path: Optional[Path] = None
    sleep: Sleep = field(default=asyncio.sleep)

    async def send(
        self, message_type: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await self.client.send(message_type, data)

    async def send_and_print(
        self, message_type: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        resp = await self.client.send(message_type, data)
        self.printer.print(resp)
        return resp
