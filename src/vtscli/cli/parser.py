"""CLI parser builder for ``vts``.

Lean ``create_parser()`` that assembles command areas via small helpers.
"""

from __future__ import annotations

import argparse

from ..version import __version__
from .sections import (
    add_artmeshes_commands,
    add_config_commands,
    add_events_commands,
    add_expressions_commands,
    add_global_args,
    add_hotkeys_commands,
    add_items_commands,
    add_models_commands,
    add_ndi_commands,
    add_params_commands,
    add_physics_commands,
    add_status_commands,
)

__all__ = ["create_parser"]


def _epilog() -> str:
    return (
        "Quick examples:\n"
        "  # First run: accept the permissions pop-up in VTube Studio\n"
        "  vts config init\n\n"
        "  # Trigger a hotkey by name\n"
        '  vts hotkeys trigger --name "My Animation"\n\n'
        "  # Tint the whole model red for five seconds\n"
        "  vts artmeshes tint --all --color ff0000 --duration 5s\n\n"
        "  # Stream events as JSON Lines until interrupted\n"
        "  vts events model-loaded\n"
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vts",
        description="Command line client for the VTube Studio public API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_epilog(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    add_global_args(parser)

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    add_config_commands(sub)
    add_status_commands(sub)
    add_params_commands(sub)
    add_hotkeys_commands(sub)
    add_artmeshes_commands(sub)
    add_models_commands(sub)
    add_expressions_commands(sub)
    add_ndi_commands(sub)
    add_physics_commands(sub)
    add_items_commands(sub)
    add_events_commands(sub)
    return parser
