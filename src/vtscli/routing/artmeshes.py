"""Handlers for art mesh listing, tinting and selection."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..commands import ArtmeshesList, ArtmeshesSelect, ArtmeshesTint
from .context import RouterContext

__all__ = ["HANDLERS", "build_tint_request"]

logger = logging.getLogger(__name__)


async def _list(ctx: RouterContext, command: ArtmeshesList) -> None:
    await ctx.send_and_print("ArtMeshListRequest")


def build_tint_request(command: ArtmeshesTint) -> Dict[str, Any]:
    color_tint: Dict[str, Any] = {
        "colorR": command.color.r,
        "colorG": command.color.g,
        "colorB": command.color.b,
        "colorA": command.color.a,
        "jeb_": command.rainbow,
    }
    if command.mix_scene_lighting is not None:
        color_tint["mixWithSceneLightingColor"] = command.mix_scene_lighting
    return {
        "colorTint": color_tint,
        "artMeshMatcher": {
            "tintAll": command.all,
            "artMeshNumber": list(command.art_mesh_number),
            "nameExact": list(command.name_exact),
            "nameContains": list(command.name_contains),
            "tagExact": list(command.tag_exact),
            "tagContains": list(command.tag_contains),
        },
    }


async def _tint(ctx: RouterContext, command: ArtmeshesTint) -> None:
    resp = await ctx.send_and_print("ColorTintRequest", build_tint_request(command))

    matched = int(resp.get("matchedArtMeshes") or 0)
    if matched <= 0:
        logger.info("Tint matched no art meshes; exiting without delay")
        return

    # The app resets the tint when the plugin disconnects
    logger.info(
        "Tint request successful (%d art meshes). Keeping the connection open for %ss...",
        matched,
        command.duration,
    )
    await ctx.sleep(command.duration)


async def _select(ctx: RouterContext, command: ArtmeshesSelect) -> None:
    data: Dict[str, Any] = {
        "requestedArtMeshCount": command.count or 0,
        "activeArtMeshes": list(command.preselect),
    }
    if command.set_text is not None:
        data["textOverride"] = command.set_text
    if command.set_help is not None:
        data["helpOverride"] = command.set_help
    await ctx.send_and_print("ArtMeshSelectionRequest", data)


HANDLERS = {
    ArtmeshesList: _list,
    ArtmeshesTint: _tint,
    ArtmeshesSelect: _select,
}
