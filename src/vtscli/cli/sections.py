"""Small helpers that add one command area each to the CLI parser.

Keeps ``parser.create_parser()`` short; every leaf subparser stores its
``Command`` builder from ``convert`` as ``build``.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from ..commands import Color, PhysicsKind
from ..config.models import (
    DEFAULT_HOST,
    DEFAULT_PLUGIN_DEVELOPER,
    DEFAULT_PLUGIN_NAME,
    DEFAULT_PORT,
)
from ..exceptions import InvalidArgument
from ..utils.parsing import parse_bool, parse_duration, parse_hex_color, parse_number
from . import convert

__all__ = [
    "add_artmeshes_commands",
    "add_config_commands",
    "add_events_commands",
    "add_expressions_commands",
    "add_global_args",
    "add_hotkeys_commands",
    "add_items_commands",
    "add_models_commands",
    "add_ndi_commands",
    "add_params_commands",
    "add_physics_commands",
    "add_status_commands",
]


def _arg_type(parse: Callable):
    """Adapt a value parser so argparse reports its error message."""

    def _convert(value: str):
        try:
            return parse(value)
        except InvalidArgument as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    _convert.__name__ = parse.__name__
    return _convert


duration_type = _arg_type(parse_duration)
color_type = _arg_type(parse_hex_color)
bool_type = _arg_type(parse_bool)
number_type = _arg_type(parse_number)


def _area(sub, name: str, help_text: str, aliases=()):
    p = sub.add_parser(name, aliases=list(aliases), help=help_text)
    return p.add_subparsers(dest="action", metavar="ACTION", required=True)


def _selector_args(parser: argparse.ArgumentParser, kind: str) -> None:
    g = parser.add_mutually_exclusive_group()
    g.add_argument("id", nargs="?", help=f"{kind.capitalize()} ID")
    g.add_argument("--name", help=f"Use the first {kind} with this name, if it exists")


def add_global_args(parser: argparse.ArgumentParser) -> None:
    g = parser.add_argument_group("Global")
    g.add_argument(
        "--config-file",
        type=Path,
        metavar="PATH",
        help="Path to the config file (env: VTS_CONFIG)",
    )
    g.add_argument(
        "--compact", action="store_true", help="Print single-line JSON output"
    )
    verbosity = g.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )
    g.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Log line format on stderr (default: text)",
    )


def add_config_commands(sub) -> None:
    actions = _area(sub, "config", "Manage the config file of this program")

    p = actions.add_parser(
        "init", help="Request plugin permissions and create the config file"
    )
    p.add_argument("--host", default=DEFAULT_HOST)
    p.add_argument("--port", type=int, default=DEFAULT_PORT)
    p.add_argument("--token", help="Existing authentication token (env: VTS_TOKEN)")
    p.add_argument("--plugin-name", default=DEFAULT_PLUGIN_NAME)
    p.add_argument("--plugin-developer", default=DEFAULT_PLUGIN_DEVELOPER)
    p.set_defaults(build=convert.config_init)

    p = actions.add_parser("show", help="Show the contents of the config file")
    p.add_argument(
        "--show-token", action="store_true", help="Print the token unmasked"
    )
    p.set_defaults(build=convert.config_show)

    p = actions.add_parser("path", help="Print the config file path")
    p.set_defaults(build=convert.config_path)


def add_status_commands(sub) -> None:
    simple = [
        ("state", "Get the current state of the API", convert.state),
        ("stats", "VTube Studio statistics", convert.stats),
        ("folders", "List VTube Studio folders", convert.folders),
        ("scene-colors", "Scene color overlay info", convert.scene_colors),
        ("face-found", "Check whether the tracker sees a face", convert.face_found),
    ]
    for name, help_text, build in simple:
        p = sub.add_parser(name, help=help_text)
        p.set_defaults(build=build)


def add_params_commands(sub) -> None:
    actions = _area(sub, "params", "Parameters", aliases=["param"])

    p = actions.add_parser("get", help="Get the value of a parameter")
    p.add_argument("name", help="Name of the parameter")
    p.set_defaults(build=convert.params_get)

    p = actions.add_parser("create", help="Create a custom parameter")
    p.add_argument("name")
    p.add_argument("--default", type=number_type, default=0.0)
    p.add_argument("--min", type=number_type, default=0.0)
    p.add_argument("--max", type=number_type, default=100.0)
    p.add_argument("--explanation")
    p.set_defaults(build=convert.params_create)

    p = actions.add_parser(
        "inject",
        help="Temporarily set a parameter (reset unless updated every second)",
    )
    p.add_argument("id")
    p.add_argument("value", type=number_type)
    p.add_argument("--weight", type=number_type)
    p.add_argument("--face-found", action="store_true")
    p.add_argument(
        "--add", action="store_true", help="Add to the current value instead of setting it"
    )
    p.set_defaults(build=convert.params_inject)

    p = actions.add_parser("delete", help="Delete a custom parameter")
    p.add_argument("name")
    p.set_defaults(build=convert.params_delete)

    p = actions.add_parser("list-inputs", help="Values of all input parameters")
    p.set_defaults(build=convert.params_list_inputs)

    p = actions.add_parser("list-live2d", help="Values of all Live2D parameters")
    p.set_defaults(build=convert.params_list_live2d)


def add_hotkeys_commands(sub) -> None:
    actions = _area(sub, "hotkeys", "Hotkeys", aliases=["hotkey"])

    p = actions.add_parser("list", help="List the hotkeys of a model")
    p.add_argument("--model-id")
    p.add_argument("--live2d-file", help="Hotkeys of a Live2D item instead")
    p.set_defaults(build=convert.hotkeys_list)

    p = actions.add_parser("trigger", help="Trigger a hotkey by ID or name")
    _selector_args(p, "hotkey")
    p.add_argument("--item", help="Item instance ID to trigger the hotkey on")
    p.set_defaults(build=convert.hotkeys_trigger)


def add_artmeshes_commands(sub) -> None:
    actions = _area(sub, "artmeshes", "Art meshes", aliases=["artmesh"])

    p = actions.add_parser("list", help="List art meshes in the current model")
    p.set_defaults(build=convert.artmeshes_list)

    p = actions.add_parser("tint", help="Tint matching art meshes")
    p.add_argument(
        "--duration",
        type=duration_type,
        required=True,
        help="How long to keep the tint (e.g. 5s, 1m30s)",
    )
    p.add_argument(
        "--color",
        type=color_type,
        default=Color(),
        help="Hex color with optional alpha (default: #ffffff)",
    )
    p.add_argument("--rainbow", "--jeb_", action="store_true")
    p.add_argument("--mix-scene-lighting", type=number_type, help="Between 0 and 1")
    p.add_argument("--all", action="store_true", help="Match all art meshes")
    p.add_argument("--art-mesh-number", type=int, action="append")
    p.add_argument("--name-exact", action="append")
    p.add_argument("--name-contains", action="append")
    p.add_argument("--tag-exact", action="append")
    p.add_argument("--tag-contains", action="append")
    p.set_defaults(build=convert.artmeshes_tint)

    p = actions.add_parser("select", help="Ask the user to select art meshes")
    p.add_argument("--set-text")
    p.add_argument("--set-help")
    p.add_argument("--count", type=int)
    p.add_argument("--preselect", action="append", metavar="ID")
    p.set_defaults(build=convert.artmeshes_select)


def add_models_commands(sub) -> None:
    actions = _area(sub, "models", "Models", aliases=["model"])

    p = actions.add_parser("list", help="List available models")
    p.set_defaults(build=convert.models_list)

    p = actions.add_parser("current", help="Get the current model")
    p.set_defaults(build=convert.models_current)

    p = actions.add_parser("load", help="Load a model by ID or name")
    _selector_args(p, "model")
    p.set_defaults(build=convert.models_load)

    p = actions.add_parser("move", help="Move the current model")
    p.add_argument("--duration", type=duration_type, default=0.0)
    p.add_argument(
        "--relative", action="store_true", help="Move relative to the current position"
    )
    p.add_argument("--x", type=number_type, help="-1 for left edge, 1 for right edge")
    p.add_argument("--y", type=number_type, help="-1 for bottom edge, 1 for top edge")
    p.add_argument("--rotation", type=number_type, help="Degrees, between -360 and 360")
    p.add_argument("--size", type=number_type, help="Between -100 and 100")
    p.set_defaults(build=convert.models_move)


def add_expressions_commands(sub) -> None:
    actions = _area(sub, "expressions", "Expressions", aliases=["expression"])

    p = actions.add_parser("list", help="List expressions of the current model")
    p.add_argument("--details", action="store_true")
    p.add_argument("file", nargs="?", help="Only return the state of this file")
    p.set_defaults(build=convert.expressions_list)

    p = actions.add_parser("activate", help="Activate an expression")
    p.add_argument("file")
    p.set_defaults(build=convert.expressions_activate)

    p = actions.add_parser("deactivate", help="Deactivate an expression")
    p.add_argument("file")
    p.set_defaults(build=convert.expressions_deactivate)


def add_ndi_commands(sub) -> None:
    actions = _area(sub, "ndi", "NDI output config")

    p = actions.add_parser("get-config", help="Show the current NDI config")
    p.set_defaults(build=convert.ndi_get_config)

    p = actions.add_parser("set-config", help="Set the NDI config")
    p.add_argument("--active", type=bool_type, metavar="BOOL")
    p.add_argument("--use-ndi5", type=bool_type, metavar="BOOL")
    p.add_argument("--use-custom-resolution", type=bool_type, metavar="BOOL")
    p.add_argument("--width", type=int, help="Multiple of 16, 256 to 8192")
    p.add_argument("--height", type=int, help="Multiple of 8, 256 to 8192")
    p.set_defaults(build=convert.ndi_set_config)


def add_physics_commands(sub) -> None:
    actions = _area(sub, "physics", "Physics")
    kinds = [kind.value for kind in PhysicsKind]

    p = actions.add_parser("get", help="Physics settings of the current model")
    p.set_defaults(build=convert.physics_get)

    p = actions.add_parser("set", help="Override physics settings")
    targets = p.add_subparsers(dest="target", metavar="TARGET", required=True)

    p = targets.add_parser("base", help="Override the base value")
    p.add_argument("kind", choices=kinds)
    p.add_argument("value", type=number_type, help="Between 0 and 100")
    p.add_argument("--duration", type=duration_type, default=0.5)
    p.set_defaults(build=convert.physics_set_base)

    p = targets.add_parser("multiplier", help="Override a group multiplier")
    p.add_argument("kind", choices=kinds)
    p.add_argument("value", type=number_type, help="Between 0 and 2")
    p.add_argument("--id", dest="group_id", required=True, help="Physics group ID")
    p.add_argument("--duration", type=duration_type, default=0.5)
    p.set_defaults(build=convert.physics_set_multiplier)


def _add_item_placement(p: argparse.ArgumentParser, *, defaults: bool) -> None:
    def default(value):
        return value if defaults else None

    p.add_argument("--x", type=number_type, default=default(0.0))
    p.add_argument("--y", type=number_type, default=default(0.5))
    p.add_argument("--size", type=number_type, default=default(0.32))
    p.add_argument("--rotation", type=number_type, default=default(0.0))
    p.add_argument("--order", type=int, default=default(1))


def add_items_commands(sub) -> None:
    actions = _area(sub, "items", "Scene items", aliases=["item"])

    p = actions.add_parser("list", help="List items and item files")
    p.add_argument("--spots", action="store_true", help="Include available spots")
    p.add_argument("--instances", action="store_true", help="Include loaded items")
    p.add_argument("--files", action="store_true", help="Include item files")
    p.add_argument("--with-file-name")
    p.add_argument("--with-instance-id")
    p.set_defaults(build=convert.items_list)

    p = actions.add_parser("load", help="Load an item into the scene")
    p.add_argument("file_name", metavar="FILE")
    _add_item_placement(p, defaults=True)
    p.add_argument("--fade-time", type=number_type, default=0.5)
    p.add_argument("--fail-if-order-taken", action="store_true")
    p.add_argument("--smoothing", type=number_type, default=0.0)
    p.add_argument("--censored", action="store_true")
    p.add_argument("--flipped", action="store_true")
    p.add_argument("--locked", action="store_true")
    p.set_defaults(build=convert.items_load)

    p = actions.add_parser("unload", help="Unload items from the scene")
    p.add_argument("--all", action="store_true")
    p.add_argument("--from-this-plugin", action="store_true")
    p.add_argument("--from-other-plugins", action="store_true")
    p.add_argument("--id", dest="ids", action="append", metavar="INSTANCE_ID")
    p.add_argument("--file", dest="files", action="append", metavar="FILE")
    p.set_defaults(build=convert.items_unload)

    p = actions.add_parser("move", help="Move an item")
    p.add_argument("id", metavar="INSTANCE_ID")
    p.add_argument("--duration", type=duration_type, default=0.0)
    p.add_argument("--fade-mode", default="linear")
    _add_item_placement(p, defaults=False)
    p.add_argument("--set-flip", action="store_true")
    p.add_argument("--flip", action="store_true")
    p.add_argument("--user-can-stop", action="store_true")
    p.set_defaults(build=convert.items_move)

    p = actions.add_parser("animation", help="Control an item's animation")
    p.add_argument("id", metavar="INSTANCE_ID")
    p.add_argument("--framerate", type=number_type)
    p.add_argument("--frame", type=int)
    p.add_argument("--brightness", type=number_type)
    p.add_argument("--opacity", type=number_type)
    play = p.add_mutually_exclusive_group()
    play.add_argument("--play", action="store_true")
    play.add_argument("--stop", action="store_true")
    frames = p.add_mutually_exclusive_group()
    frames.add_argument(
        "--stop-frame", dest="stop_frames", type=int, action="append", metavar="N"
    )
    frames.add_argument("--reset-stop-frames", action="store_true")
    p.set_defaults(build=convert.items_animation)


def add_events_commands(sub) -> None:
    actions = _area(sub, "events", "Subscribe to events", aliases=["event"])

    p = actions.add_parser("test", help="Periodic test event")
    p.add_argument("--message", default="Hello from vts")
    p.set_defaults(build=convert.events_test)

    p = actions.add_parser("model-loaded", help="Model loaded or unloaded")
    p.add_argument("--model-id", dest="model_ids", action="append", metavar="ID")
    p.set_defaults(build=convert.events_model_loaded)

    p = actions.add_parser("tracking-status", help="Face or hand tracking changed")
    p.set_defaults(build=convert.events_tracking_status)

    p = actions.add_parser("hotkey-triggered", help="A hotkey was triggered")
    p.add_argument("--action", help="Only report hotkeys of this action type")
    p.set_defaults(build=convert.events_hotkey_triggered)
