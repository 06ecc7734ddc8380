"""Connection config record shared by the CLI, store, and session."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8001
DEFAULT_PLUGIN_NAME = "VTube Studio CLI"
DEFAULT_PLUGIN_DEVELOPER = "Walfie"


@dataclass
class ConnectionConfig:
    """Where to connect and how this plugin identifies itself."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    token: Optional[str] = field(default=None, repr=False)
    plugin_name: str = DEFAULT_PLUGIN_NAME
    plugin_developer: str = DEFAULT_PLUGIN_DEVELOPER

    @property
    def url(self) -> str:
        return f"ws://{self.host}:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk mapping (field order is the canonical order)."""
        return asdict(self)

    def redacted(self) -> Dict[str, Any]:
        """Same as ``to_dict`` but with the token masked."""
        data = self.to_dict()
        if data.get("token"):
            data["token"] = "[REDACTED]"
        return data


__all__ = [
    "ConnectionConfig",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_PLUGIN_DEVELOPER",
    "DEFAULT_PLUGIN_NAME",
]
