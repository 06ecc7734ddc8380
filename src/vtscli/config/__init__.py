"""Connection config model, file store, and path/env resolution."""

from .env import (
    CONFIG_ENV_VAR,
    TOKEN_ENV_VAR,
    load_dotenv_overrides,
    load_env_overrides,
    load_overrides,
    resolve_config_path,
)
from .models import ConnectionConfig
from .paths import default_config_dir, default_config_path
from .store import config_from_mapping, dump_config, load_config, persist_config

__all__ = [
    "CONFIG_ENV_VAR",
    "TOKEN_ENV_VAR",
    "ConnectionConfig",
    "config_from_mapping",
    "default_config_dir",
    "default_config_path",
    "dump_config",
    "load_config",
    "load_dotenv_overrides",
    "load_env_overrides",
    "load_overrides",
    "persist_config",
    "resolve_config_path",
]
