"""Handlers for config management, status queries and NDI settings."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..commands import (
    ConfigInit,
    ConfigPath,
    ConfigShow,
    FaceFound,
    Folders,
    NdiGetConfig,
    NdiSetConfig,
    SceneColors,
    State,
    Stats,
)
from .context import RouterContext

__all__ = ["HANDLERS"]

logger = logging.getLogger(__name__)


async def _config_init(ctx: RouterContext, command: ConfigInit) -> None:
    # Any request triggers authentication, which prompts the user in the app
    await ctx.send("StatisticsRequest")
    logger.info("Plugin permissions granted for %s", ctx.config.url)


async def _config_show(ctx: RouterContext, command: ConfigShow) -> None:
    if command.show_token:
        ctx.printer.print(ctx.config.to_dict())
    else:
        ctx.printer.print(ctx.config.redacted())


async def _config_path(ctx: RouterContext, command: ConfigPath) -> None:
    ctx.printer.print_text(str(ctx.config_path))


def _simple(message_type: str):
    async def _handler(ctx: RouterContext, command: Any) -> None:
        await ctx.send_and_print(message_type)

    _handler.__name__ = f"_send_{message_type}"
    return _handler


async def _ndi_get(ctx: RouterContext, command: NdiGetConfig) -> None:
    await ctx.send_and_print("NDIConfigRequest", {"setNewConfig": False})


async def _ndi_set(ctx: RouterContext, command: NdiSetConfig) -> None:
    data: Dict[str, Any] = {"setNewConfig": True}
    optional = {
        "ndiActive": command.active,
        "useNDI5": command.use_ndi5,
        "useCustomResolution": command.use_custom_resolution,
        "customWidthNDI": command.width,
        "customHeightNDI": command.height,
    }
    data.update({key: value for key, value in optional.items() if value is not None})
    await ctx.send_and_print("NDIConfigRequest", data)


HANDLERS = {
    ConfigInit: _config_init,
    ConfigShow: _config_show,
    ConfigPath: _config_path,
    State: _simple("APIStateRequest"),
    Stats: _simple("StatisticsRequest"),
    Folders: _simple("VTSFolderInfoRequest"),
    SceneColors: _simple("SceneColorOverlayInfoRequest"),
    FaceFound: _simple("FaceFoundRequest"),
    NdiGetConfig: _ndi_get,
    NdiSetConfig: _ndi_set,
}
