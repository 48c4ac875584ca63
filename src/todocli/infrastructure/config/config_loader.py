"""
Configuration loading.

Resolves the YAML configuration file, validates it against ``TodoConfig``
and applies environment overrides.

Resolution order for the file:
1. Explicit ``config_path`` argument (must exist)
2. ``TODOCLI_CONFIG`` environment variable (must exist)
3. ``~/.config/todocli/config.yaml`` (optional; defaults when missing)

``LOGLEVEL`` overrides ``log_level`` from the file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from todocli.core.domain.config_schema import TodoConfig
from todocli.core.domain.errors import ConfigError

logger = structlog.get_logger(__name__)

CONFIG_ENV_VAR = "TODOCLI_CONFIG"
LOGLEVEL_ENV_VAR = "LOGLEVEL"
DEFAULT_CONFIG_PATH = Path("~/.config/todocli/config.yaml")


def resolve_config_path(config_path: str | os.PathLike[str] | None = None) -> tuple[Path, bool]:
    """Return the config file to read and whether it was explicitly requested."""
    if config_path:
        return Path(config_path).expanduser(), True

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True

    return DEFAULT_CONFIG_PATH.expanduser(), False


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Invalid YAML in config file: {path}", details={"path": str(path)}
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Couldn't read config file: {path}", details={"path": str(path)}
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping: {path}",
            details={"path": str(path), "type": type(data).__name__},
        )
    return data


def load_config(config_path: str | os.PathLike[str] | None = None) -> TodoConfig:
    """
    Load and validate the todocli configuration.

    Args:
        config_path: Optional explicit path to a YAML config file

    Returns:
        Validated TodoConfig

    Raises:
        ConfigError: If an explicitly named file is missing, the YAML is
            invalid, or the content doesn't match the schema
    """
    path, explicit = resolve_config_path(config_path)

    data: dict[str, Any] = {}
    if path.exists():
        data = _read_yaml(path)
        logger.debug("config.loaded", path=str(path))
    elif explicit:
        raise ConfigError(f"Config file not found: {path}", details={"path": str(path)})

    env_level = os.getenv(LOGLEVEL_ENV_VAR)
    if env_level:
        data["log_level"] = env_level

    try:
        return TodoConfig.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ConfigError(
            f"Invalid configuration in {path}: {'; '.join(errors)}",
            details={"path": str(path), "errors": errors},
        ) from exc
