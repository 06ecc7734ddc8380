"""Handlers for listing and triggering hotkeys."""

from __future__ import annotations

from typing import Any, Dict

from ..commands import HotkeysList, HotkeysTrigger
from .context import RouterContext
from .resolver import resolve_selector

__all__ = ["HANDLERS"]


async def _list(ctx: RouterContext, command: HotkeysList) -> None:
    data: Dict[str, Any] = {}
    if command.model_id is not None:
        data["modelID"] = command.model_id
    if command.live2d_file is not None:
        data["live2DItemFileName"] = command.live2d_file
    await ctx.send_and_print("HotkeysInCurrentModelRequest", data)


async def _trigger(ctx: RouterContext, command: HotkeysTrigger) -> None:
    hotkey_id = await resolve_selector(
        ctx,
        command.selector,
        kind="hotkey",
        listing_request="HotkeysInCurrentModelRequest",
        listing_key="availableHotkeys",
        id_key="hotkeyID",
        name_key="name",
    )
    data: Dict[str, Any] = {"hotkeyID": hotkey_id}
    if command.item is not None:
        data["itemInstanceID"] = command.item
    await ctx.send_and_print("HotkeyTriggerRequest", data)


HANDLERS = {
    HotkeysList: _list,
    HotkeysTrigger: _trigger,
}
