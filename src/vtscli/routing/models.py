"""Handlers for listing, loading and moving models, and for expressions."""

from __future__ import annotations

from typing import Any, Dict

from ..commands import (
    ExpressionsActivate,
    ExpressionsDeactivate,
    ExpressionsList,
    ModelsCurrent,
    ModelsList,
    ModelsLoad,
    ModelsMove,
)
from .context import RouterContext
from .resolver import resolve_selector

__all__ = ["HANDLERS"]


async def _list(ctx: RouterContext, command: ModelsList) -> None:
    await ctx.send_and_print("AvailableModelsRequest")


async def _current(ctx: RouterContext, command: ModelsCurrent) -> None:
    await ctx.send_and_print("CurrentModelRequest")


async def _load(ctx: RouterContext, command: ModelsLoad) -> None:
    model_id = await resolve_selector(
        ctx,
        command.selector,
        kind="model",
        listing_request="AvailableModelsRequest",
        listing_key="availableModels",
        id_key="modelID",
        name_key="modelName",
    )
    await ctx.send_and_print("ModelLoadRequest", {"modelID": model_id})


async def _move(ctx: RouterContext, command: ModelsMove) -> None:
    data: Dict[str, Any] = {
        "timeInSeconds": command.duration,
        "valuesAreRelativeToModel": command.relative,
    }
    optional = {
        "positionX": command.x,
        "positionY": command.y,
        "rotation": command.rotation,
        "size": command.size,
    }
    data.update({key: value for key, value in optional.items() if value is not None})
    await ctx.send_and_print("MoveModelRequest", data)


async def _expressions_list(ctx: RouterContext, command: ExpressionsList) -> None:
    data: Dict[str, Any] = {"details": command.details}
    if command.file is not None:
        data["expressionFile"] = command.file
    await ctx.send_and_print("ExpressionStateRequest", data)


async def _expressions_activate(
    ctx: RouterContext, command: ExpressionsActivate
) -> None:
    await ctx.send_and_print(
        "ExpressionActivationRequest", {"expressionFile": command.file, "active": True}
    )


async def _expressions_deactivate(
    ctx: RouterContext, command: ExpressionsDeactivate
) -> None:
    await ctx.send_and_print(
        "ExpressionActivationRequest", {"expressionFile": command.file, "active": False}
    )


HANDLERS = {
    ModelsList: _list,
    ModelsCurrent: _current,
    ModelsLoad: _load,
    ModelsMove: _move,
    ExpressionsList: _expressions_list,
    ExpressionsActivate: _expressions_activate,
    ExpressionsDeactivate: _expressions_deactivate,
}
