"""Process-level logging for the CLI.

Logs go to stderr so stdout carries only JSON output. Text mode uses a
short ``LEVEL logger: message`` line; ``json`` mode emits JSON Lines.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from .redaction import RedactionFilter

__all__ = ["JSONFormatter", "console_level", "setup_logging"]

_NOISY_THIRD_PARTY_LOGGERS = ("aiohttp", "aiohttp.access", "aiohttp.client", "asyncio")

_LOG_RECORD_IGNORED_FIELDS = {
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "thread",
    "threadName",
    "exc_info",
    "exc_text",
    "stack_info",
    "taskName",
    "message",
}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON Lines."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        entry = {
            "timestamp": _to_iso_millis(datetime.fromtimestamp(record.created, timezone.utc)),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_IGNORED_FIELDS or key.startswith("_"):
                continue
            entry[key] = _json_safe(value)

        return json.dumps(entry)


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    fmt: str = "text",
    stream: Optional[TextIO] = None,
) -> RedactionFilter:
    """Install a single stderr handler on the root logger.

    Returns:
        The redaction filter, so callers can register the active token
    """
    level = console_level(verbose=verbose, quiet=quiet)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    redaction = RedactionFilter()
    handler.addFilter(redaction)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _limit_third_party_noise()
    return redaction


def _limit_third_party_noise() -> None:
    for name in _NOISY_THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _to_iso_millis(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def _json_safe(value: object) -> object:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value
