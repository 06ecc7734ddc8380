"""Load and persist the connection config file.

Behavior:
- A missing file raises ``ConfigNotFound`` so the CLI can point the user at
  ``vts config init``.
- Unreadable or malformed content raises ``ConfigParseError``.
- Writes go through a temp file in the same directory followed by
  ``os.replace`` so a crash never leaves a truncated record behind; any
  ``OSError`` is raised as ``PersistError``.

Files ending in ``.yaml``/``.yml`` are read and written as YAML, everything
else as JSON.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from ..exceptions import ConfigNotFound, ConfigParseError, PersistError
from .models import ConnectionConfig

__all__ = ["config_from_mapping", "dump_config", "load_config", "persist_config"]

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_STR_FIELDS = ("host", "plugin_name", "plugin_developer")


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in _YAML_SUFFIXES


def config_from_mapping(data: Mapping[str, Any]) -> ConnectionConfig:
    """Build a config from a parsed mapping, applying defaults for missing keys."""
    if not isinstance(data, Mapping):
        raise ConfigParseError(
            f"invalid config format (expected mapping, got {type(data).__name__})"
        )

    kwargs: Dict[str, Any] = {}
    for key in _STR_FIELDS:
        if key in data:
            if not isinstance(data[key], str):
                raise ConfigParseError(f"config field `{key}` must be a string")
            kwargs[key] = data[key]

    if "port" in data:
        port = data["port"]
        # bool is an int subclass; reject it explicitly
        if isinstance(port, bool) or not isinstance(port, int):
            raise ConfigParseError("config field `port` must be an integer")
        if not 0 < port < 65536:
            raise ConfigParseError(f"config field `port` out of range: {port}")
        kwargs["port"] = port

    token = data.get("token")
    if token is not None and not isinstance(token, str):
        raise ConfigParseError("config field `token` must be a string or null")
    kwargs["token"] = token or None

    return ConnectionConfig(**kwargs)


def load_config(path: Path) -> ConnectionConfig:
    """Read the config record stored at ``path``."""
    path = Path(path)
    if not path.exists():
        raise ConfigNotFound(path)

    try:
        with path.open("r", encoding="utf-8") as handle:
            if _is_yaml(path):
                data = yaml.safe_load(handle)
            else:
                data = json.load(handle)
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigParseError(f"failed to parse config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigParseError(f"failed to read config file {path}: {exc}") from exc

    config = config_from_mapping(data if data is not None else {})
    logger.debug("Loaded config from %s (host=%s port=%s)", path, config.host, config.port)
    return config


def dump_config(config: ConnectionConfig, *, as_yaml: bool = False) -> str:
    """Serialize ``config`` to its canonical text form."""
    data = config.to_dict()
    if as_yaml:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
    return json.dumps(data, indent=2) + "\n"


def persist_config(path: Path, config: ConnectionConfig) -> None:
    """Atomically write ``config`` to ``path``, creating parent directories."""
    path = Path(path)
    text = dump_config(config, as_yaml=_is_yaml(path))
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        logger.error("Failed to write config file %s", path)
        raise PersistError(f"failed to write config file {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    logger.debug("Wrote config file %s", path)
