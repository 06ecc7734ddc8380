"""Command routing: handlers per area plus the name resolver."""

from .context import RouterContext
from .resolver import resolve_name, resolve_selector
from .router import HANDLERS, CommandRouter

__all__ = [
    "CommandRouter",
    "HANDLERS",
    "RouterContext",
    "resolve_name",
    "resolve_selector",
]
