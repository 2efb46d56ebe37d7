"""Configuration loading from the environment and an optional .env file."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from ..errors.internal import ConfigError
from .model import ConnectionConfig

# Environment variable -> ConnectionConfig field
REQUIRED_ENV_VARS: dict[str, str] = {
    "TWITCH_NICK": "nick",
    "TWITCH_TOKEN": "oauth_token",
    "TWITCH_CHANNEL": "channel",
    "TWITCH_CHANNEL_ID": "channel_id",
    "TWITCH_CLIENT_ID": "client_id",
}
SHOW_LOGS_ENV_VAR = "SHOW_LOGS"
_TRUTHY = ("true", "1", "yes")


def user_config_path() -> Path:
    """Return the per-user settings file, ``~/.config/argus/argus.conf``."""
    return Path.home() / ".config" / "argus" / "argus.conf"


def load_env_file(env_file: str | Path | None = None) -> bool:
    """Load variables from a dotenv-format file without overriding the environment.

    Args:
        env_file: Explicit path. When omitted, the user config file is used
            if it exists, otherwise the nearest ``.env``.

    Returns:
        True if a file was found and loaded.
    """
    if env_file:
        path = str(env_file)
    elif user_config_path().is_file():
        path = str(user_config_path())
    else:
        logging.info(
            f"📄 No config file at {user_config_path()}, falling back to .env"
        )
        path = find_dotenv(usecwd=True)
    if not path or not Path(path).is_file():
        logging.info(
            "📄 No .env file found, falling back to system environment variables"
        )
        return False
    load_dotenv(path, override=False)
    logging.debug(f"📄 Loaded environment from {path}")
    return True


def config_from_env(environ: Mapping[str, str] | None = None) -> ConnectionConfig:
    """Build and validate a ConnectionConfig from environment variables.

    Raises:
        ConfigError: If required variables are missing or fail validation.
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}
    missing: list[str] = []
    for var, field in REQUIRED_ENV_VARS.items():
        value = env.get(var, "").strip()
        if not value:
            missing.append(var)
        values[field] = value

    if missing:
        raise ConfigError(
            "Please set the following environment variables in your .env file: "
            + ", ".join(missing),
            data={"missing": missing},
        )

    values["show_logs"] = env.get(SHOW_LOGS_ENV_VAR, "").strip().lower() in _TRUTHY

    try:
        return ConnectionConfig.model_validate(values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e


def load_config(env_file: str | Path | None = None) -> ConnectionConfig:
    """Load the .env file (if any) and return the validated configuration."""
    load_env_file(env_file)
    return config_from_env()
