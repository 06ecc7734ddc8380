"""JSON output of responses and pushed events.

The format is an explicit value built once per invocation and handed to the
``Printer``; there is no process-wide flag.
"""

from __future__ import annotations

import dataclasses
import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, TextIO

__all__ = ["OutputFormat", "Printer", "format_value"]


@dataclass(frozen=True)
class OutputFormat:
    """Pretty (indented) or compact (single-line) JSON."""

    compact: bool = False

    def for_subscription(self) -> "OutputFormat":
        # Streamed events are usually consumed by other programs
        return OutputFormat(compact=True)


def _default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(value: Any, fmt: OutputFormat) -> str:
    """Serialize ``value`` to JSON text in the requested format."""
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    if fmt.compact:
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_default
        )
    return json.dumps(value, indent=2, ensure_ascii=False, default=_default)


class Printer:
    """Write one formatted value per line to a text stream."""

    def __init__(self, fmt: OutputFormat, stream: Optional[TextIO] = None):
        self.fmt = fmt
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement is honored
        return self._stream if self._stream is not None else sys.stdout

    def print(self, value: Any) -> None:
        self.stream.write(format_value(value, self.fmt) + "\n")
        self.stream.flush()

    def print_text(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()
