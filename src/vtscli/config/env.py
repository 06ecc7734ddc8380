"""Environment and ``.env`` overrides for the config path and token."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .paths import default_config_path

__all__ = [
    "CONFIG_ENV_VAR",
    "TOKEN_ENV_VAR",
    "load_dotenv_overrides",
    "load_env_overrides",
    "load_overrides",
    "resolve_config_path",
]

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VTS_CONFIG"
TOKEN_ENV_VAR = "VTS_TOKEN"

_ENV_TO_KEY = {
    CONFIG_ENV_VAR: "config_file",
    TOKEN_ENV_VAR: "token",
}


def load_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect supported variables from the process environment."""
    env = os.environ if environ is None else environ
    overrides: Dict[str, str] = {}
    for env_key, key in _ENV_TO_KEY.items():
        value = env.get(env_key)
        if value:
            overrides[key] = value
    return overrides


def load_dotenv_overrides(dotenv_path: Optional[Path] = None) -> Dict[str, str]:
    """Collect supported variables from a ``.env`` file, if one exists."""
    path = dotenv_path or Path(".env")
    if not path.is_file():
        return {}

    values = dotenv_values(path)
    overrides: Dict[str, str] = {}
    for env_key, key in _ENV_TO_KEY.items():
        value = values.get(env_key)
        if value:
            overrides[key] = value
    if overrides:
        # Names only; values may be secrets
        logger.debug("Loaded %s from %s", sorted(overrides), path)
    return overrides


def load_overrides(
    environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None
) -> Dict[str, str]:
    """Merge overrides; real environment variables win over ``.env`` values."""
    merged = load_dotenv_overrides(dotenv_path)
    merged.update(load_env_overrides(environ))
    return merged


def resolve_config_path(
    cli_path: Optional[Path], overrides: Mapping[str, str]
) -> Path:
    """Pick the config path: CLI flag, then env/.env, then the platform default."""
    if cli_path is not None:
        return Path(cli_path).expanduser()
    if overrides.get("config_file"):
        return Path(overrides["config_file"]).expanduser()
    return default_config_path()
