"""Handlers for scene items."""

from __future__ import annotations

from typing import Any, Dict

from ..commands import (
    ItemsAnimation,
    ItemsList,
    ItemsLoad,
    ItemsMove,
    ItemsUnload,
    PlayState,
)
from .context import RouterContext

__all__ = ["HANDLERS", "build_animation_request"]


def _without_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


async def _list(ctx: RouterContext, command: ItemsList) -> None:
    data: Dict[str, Any] = {
        "includeAvailableSpots": command.spots,
        "includeItemInstancesInScene": command.instances,
        "includeAvailableItemFiles": command.files,
    }
    data.update(
        _without_none(
            {
                "onlyItemsWithFileName": command.with_file_name,
                "onlyItemsWithInstanceID": command.with_instance_id,
            }
        )
    )
    await ctx.send_and_print("ItemListRequest", data)


async def _load(ctx: RouterContext, command: ItemsLoad) -> None:
    await ctx.send_and_print(
        "ItemLoadRequest",
        {
            "fileName": command.file_name,
            "positionX": command.x,
            "positionY": command.y,
            "size": command.size,
            "rotation": command.rotation,
            "fadeTime": command.fade_time,
            "order": command.order,
            "failIfOrderTaken": command.fail_if_order_taken,
            "smoothing": command.smoothing,
            "censored": command.censored,
            "flipped": command.flipped,
            "locked": command.locked,
            # Items must outlive this short-lived connection
            "unloadWhenPluginDisconnects": False,
        },
    )


async def _unload(ctx: RouterContext, command: ItemsUnload) -> None:
    await ctx.send_and_print(
        "ItemUnloadRequest",
        {
            "unloadAllInScene": command.all,
            "unloadAllLoadedByThisPlugin": command.from_this_plugin,
            "allowUnloadingItemsLoadedByUserOrOtherPlugins": command.from_other_plugins,
            "instanceIDs": list(command.ids),
            "fileNames": list(command.files),
        },
    )


async def _move(ctx: RouterContext, command: ItemsMove) -> None:
    item: Dict[str, Any] = {
        "itemInstanceID": command.id,
        "timeInSeconds": command.duration,
        "fadeMode": command.fade_mode,
        "setFlip": command.set_flip,
        "flip": command.flip,
        "userCanStop": command.user_can_stop,
    }
    item.update(
        _without_none(
            {
                "positionX": command.x,
                "positionY": command.y,
                "size": command.size,
                "rotation": command.rotation,
                "order": command.order,
            }
        )
    )
    await ctx.send_and_print("ItemMoveRequest", {"itemsToMove": [item]})


def build_animation_request(command: ItemsAnimation) -> Dict[str, Any]:
    """Collapse the play/stop and stop-frame toggles into request fields.

    "Leave unchanged" is encoded with ``setAnimationPlayState`` /
    ``setAutoStopFrames`` false, which is distinct from explicitly stopping
    or clearing.
    """
    play_state = command.play_state
    stop_frames = command.stop_frames
    data: Dict[str, Any] = {
        "itemInstanceID": command.item_instance_id,
        "setAnimationPlayState": play_state is not PlayState.UNCHANGED,
        "animationPlayState": play_state is not PlayState.STOP,
        "setAutoStopFrames": stop_frames.changed,
        "autoStopFrames": [] if stop_frames.reset else list(stop_frames.frames),
    }
    data.update(
        _without_none(
            {
                "framerate": command.framerate,
                "frame": command.frame,
                "brightness": command.brightness,
                "opacity": command.opacity,
            }
        )
    )
    return data


async def _animation(ctx: RouterContext, command: ItemsAnimation) -> None:
    await ctx.send_and_print(
        "ItemAnimationControlRequest", build_animation_request(command)
    )


HANDLERS = {
    ItemsList: _list,
    ItemsLoad: _load,
    ItemsUnload: _unload,
    ItemsMove: _move,
    ItemsAnimation: _animation,
}
