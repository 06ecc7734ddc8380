"""Parsers for CLI values: durations, hex colors and booleans."""

from __future__ import annotations

import math
import re

from ..commands import Color
from ..exceptions import InvalidArgument

__all__ = ["parse_bool", "parse_duration", "parse_hex_color", "parse_number"]

_DURATION_UNITS = {
    "ms": 0.001,
    "s": 1.0,
    "sec": 1.0,
    "m": 60.0,
    "min": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)\s*(ms|sec|min|hr|s|m|h)", re.IGNORECASE)
_HEX = re.compile(r"^[0-9a-fA-F]+$")
_TRUE = {"1", "true", "yes", "on", "y"}
_FALSE = {"0", "false", "no", "off", "n"}


def parse_number(value: str) -> float:
    """Parse a finite decimal number; `inf` and `nan` are rejected."""
    try:
        number = float(value)
    except ValueError:
        raise InvalidArgument(f"could not parse `{value}` as a number") from None
    if not math.isfinite(number):
        raise InvalidArgument(f"expected a finite number, got `{value}`")
    return number


def parse_duration(value: str) -> float:
    """Parse ``500ms``, ``5s``, ``1m30s`` or a bare number of seconds.

    Returns:
        Duration in seconds
    """
    text = value.strip()
    if not text:
        raise InvalidArgument("empty duration")
    try:
        seconds = float(text)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            raise InvalidArgument(f"duration must be a finite number: `{value}`")
        if seconds < 0:
            raise InvalidArgument(f"duration must not be negative: `{value}`")
        return seconds

    total = 0.0
    pos = 0
    compact = text.replace(" ", "")
    for match in _DURATION_PART.finditer(compact):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2).lower()]
        pos = match.end()
    if pos != len(compact) or pos == 0:
        raise InvalidArgument(
            f"could not parse `{value}` as a duration (e.g. `500ms`, `5s`, `1m30s`)"
        )
    return total


def parse_hex_color(value: str) -> Color:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional)."""
    digits = value.strip().lstrip("#")
    if not _HEX.match(digits) or len(digits) not in (3, 4, 6, 8):
        raise InvalidArgument(f"could not parse string `{value}` as a hex color value")

    if len(digits) in (3, 4):
        channels = [int(ch * 2, 16) for ch in digits]
    else:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return Color(r=r, g=g, b=b, a=a)


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise InvalidArgument(f"expected true or false, got `{value}`")
