"""YAML config loader that turns every load failure into a ConfigError."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from rainalert.config.schema import JobConfig

DEFAULT_CONFIG = "ops/configs/default.yaml"
CONFIG_PATH_ENV = "CONFIG_PATH"


class ConfigError(Exception):
    """Raised when the job configuration cannot be read or is invalid."""


def resolve_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return $CONFIG_PATH if set, otherwise the bundled default path."""
    env = os.environ if env is None else env
    return Path(env.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG)


def load_config(path: str | Path) -> JobConfig:
    """Load and validate config from a YAML (or JSON) file.

    Raises ConfigError naming the first failing rule.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to open config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    try:
        return JobConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(_first_error(e)) from e


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "config"
    msg = first["msg"].removeprefix("Value error, ")
    return f"{field}: {msg}"
