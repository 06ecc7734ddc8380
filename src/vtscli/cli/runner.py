"""Top-level runner that wires overrides, logging and the session orchestrator."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Mapping, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from ..commands import ConfigInit
from ..config.env import load_overrides, resolve_config_path
from ..exceptions import SessionError, VtsError
from ..output import OutputFormat
from ..session import ClientFactory, SessionOrchestrator
from ..utils.logging_setup import setup_logging
from .convert import to_command

__all__ = ["EXIT_ERROR", "EXIT_INTERRUPTED", "EXIT_OK", "run"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _handle_interrupt(console: Console) -> int:
    console.print("\n[yellow]Interrupted, connection closed[/yellow]")
    return EXIT_INTERRUPTED


def _report(console: Console, exc: VtsError) -> int:
    if isinstance(exc, SessionError):
        console.print(f"[red]Error ({exc.stage}):[/red] {escape(str(exc.error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return EXIT_ERROR


async def run(
    console: Console,
    args: argparse.Namespace,
    *,
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
    client_factory: Optional[ClientFactory] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Run the command selected by ``args`` and return the process exit code."""
    overrides = load_overrides(environ, dotenv_path)
    redaction = setup_logging(
        verbose=bool(getattr(args, "verbose", False)),
        quiet=bool(getattr(args, "quiet", False)),
        fmt=getattr(args, "log_format", "text"),
    )
    token_override = overrides.get("token")
    redaction.add_secret(token_override)

    try:
        command = to_command(args)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return EXIT_ERROR
    if isinstance(command, ConfigInit):
        redaction.add_secret(command.config.token)

    config_path = resolve_config_path(getattr(args, "config_file", None), overrides)
    orchestrator = SessionOrchestrator(
        command,
        config_path,
        fmt=OutputFormat(compact=bool(getattr(args, "compact", False))),
        token_override=token_override,
        client_factory=client_factory,
        stream=stream,
    )

    try:
        await orchestrator.run()
    except VtsError as exc:
        logger.debug("Command failed", exc_info=True)
        return _report(console, exc)
    except (KeyboardInterrupt, asyncio.CancelledError):
        return _handle_interrupt(console)
    return EXIT_OK
