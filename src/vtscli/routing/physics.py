"""Handlers for reading and overriding model physics.

A set command carries exactly one override, which goes into the list for
its target class (strength or wind); the other list is sent empty.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from ..commands import PhysicsGet, PhysicsKind, PhysicsSetBase, PhysicsSetMultiplier
from .context import RouterContext

__all__ = ["HANDLERS", "build_physics_request"]


def build_physics_request(
    command: Union[PhysicsSetBase, PhysicsSetMultiplier],
) -> Dict[str, Any]:
    if isinstance(command, PhysicsSetBase):
        override = {
            "id": "",
            "value": float(command.value),
            "setBaseValue": True,
            "overrideSeconds": float(command.duration),
        }
    else:
        override = {
            "id": command.group_id,
            "value": float(command.value),
            "setBaseValue": False,
            "overrideSeconds": float(command.duration),
        }

    request: Dict[str, Any] = {"strengthOverrides": [], "windOverrides": []}
    if command.kind is PhysicsKind.STRENGTH:
        request["strengthOverrides"] = [override]
    else:
        request["windOverrides"] = [override]
    return request


async def _get(ctx: RouterContext, command: PhysicsGet) -> None:
    await ctx.send_and_print("GetCurrentModelPhysicsRequest")


async def _set(
    ctx: RouterContext, command: Union[PhysicsSetBase, PhysicsSetMultiplier]
) -> None:
    await ctx.send_and_print(
        "SetCurrentModelPhysicsRequest", build_physics_request(command)
    )


HANDLERS = {
    PhysicsGet: _get,
    PhysicsSetBase: _set,
    PhysicsSetMultiplier: _set,
}
