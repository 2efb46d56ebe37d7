"""Configuration package: validated connection settings and their loader."""

from .loader import (
    REQUIRED_ENV_VARS,
    config_from_env,
    load_config,
    load_env_file,
    user_config_path,
)
from .model import ConnectionConfig

__all__ = [
    "ConnectionConfig",
    "REQUIRED_ENV_VARS",
    "config_from_env",
    "load_config",
    "load_env_file",
    "user_config_path",
]
