"""Handlers for custom and Live2D parameters."""

from __future__ import annotations

from typing import Any, Dict

from ..commands import (
    ParamsCreate,
    ParamsDelete,
    ParamsGet,
    ParamsInject,
    ParamsListInputs,
    ParamsListLive2D,
)
from .context import RouterContext

__all__ = ["HANDLERS"]


async def _get(ctx: RouterContext, command: ParamsGet) -> None:
    await ctx.send_and_print("ParameterValueRequest", {"name": command.name})


async def _create(ctx: RouterContext, command: ParamsCreate) -> None:
    data: Dict[str, Any] = {
        "parameterName": command.name,
        "min": command.min,
        "max": command.max,
        "defaultValue": command.default,
    }
    if command.explanation is not None:
        data["explanation"] = command.explanation
    await ctx.send_and_print("ParameterCreationRequest", data)


async def _inject(ctx: RouterContext, command: ParamsInject) -> None:
    value: Dict[str, Any] = {"id": command.id, "value": command.value}
    if command.weight is not None:
        value["weight"] = command.weight
    await ctx.send_and_print(
        "InjectParameterDataRequest",
        {
            "faceFound": command.face_found,
            "mode": "add" if command.add else "set",
            "parameterValues": [value],
        },
    )


async def _delete(ctx: RouterContext, command: ParamsDelete) -> None:
    await ctx.send_and_print("ParameterDeletionRequest", {"parameterName": command.name})


async def _list_inputs(ctx: RouterContext, command: ParamsListInputs) -> None:
    await ctx.send_and_print("InputParameterListRequest")


async def _list_live2d(ctx: RouterContext, command: ParamsListLive2D) -> None:
    await ctx.send_and_print("Live2DParameterListRequest")


HANDLERS = {
    ParamsGet: _get,
    ParamsCreate: _create,
    ParamsInject: _inject,
    ParamsDelete: _delete,
    ParamsListInputs: _list_inputs,
    ParamsListLive2D: _list_live2d,
}
