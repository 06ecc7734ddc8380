"""Per-platform default location of the config file."""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Mapping, Optional

__all__ = ["CONFIG_FILE_NAME", "default_config_dir", "default_config_path"]

CONFIG_FILE_NAME = "config.json"
_QUALIFIER = "com.github"
_ORGANIZATION = "walfie"
_APPLICATION = "vtubestudio-cli"


def default_config_dir(
    system: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Return the per-user config directory for this application.

    Follows the usual conventions: ``%APPDATA%`` on Windows,
    ``~/Library/Application Support`` on macOS and ``$XDG_CONFIG_HOME``
    (falling back to ``~/.config``) everywhere else.
    """
    system = system or platform.system()
    env = os.environ if environ is None else environ

    if system == "Windows":
        appdata = env.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / _ORGANIZATION / _APPLICATION / "config"

    if system == "Darwin":
        return (
            Path.home()
            / "Library"
            / "Application Support"
            / f"{_QUALIFIER}.{_ORGANIZATION}.{_APPLICATION}"
        )

    xdg = env.get("XDG_CONFIG_HOME")
    # XDG says relative values must be ignored
    base = Path(xdg) if xdg and os.path.isabs(xdg) else Path.home() / ".config"
    return base / _APPLICATION


def default_config_path(
    system: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    return default_config_dir(system, environ) / CONFIG_FILE_NAME
