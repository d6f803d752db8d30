"""Configuration management for sdxxd.

Sources are layered from lowest to highest priority:

1. Default values
2. Configuration file (``--config``, ``SDXXD_CONFIG_PATH`` or discovery)
3. Environment variables

Example usage::

    from sdxxd.config import load_config

    config = load_config()
    print(config.dump.read_buffer_size)
    print(config.revert.batch_size)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sdxxd.config.env import (
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_READ_BUFFER_SIZE,
    ENV_REVERT_BATCH_SIZE,
    get_config_path_from_env,
    get_env_overrides,
)
from sdxxd.config.loader import ConfigLoader
from sdxxd.config.schema import DumpSettings, LogLevel, RevertSettings, SdxxdConfig
from sdxxd.core.exceptions import ConfigError

__all__ = [
    # Schema classes
    "DumpSettings",
    "LogLevel",
    "RevertSettings",
    "SdxxdConfig",
    # Loader
    "ConfigLoader",
    # Environment variables
    "ENV_CONFIG_PATH",
    "ENV_LOG_LEVEL",
    "ENV_READ_BUFFER_SIZE",
    "ENV_REVERT_BATCH_SIZE",
    "get_env_overrides",
    "load_config",
]


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Path | str | None = None,
    use_env: bool = True,
    use_file: bool = True,
) -> SdxxdConfig:
    """Load configuration from defaults, a config file and the environment.

    Args:
        config_path: Optional explicit path to a config file.
        use_env: Whether to apply environment variable overrides.
        use_file: Whether to look for and load config files.

    Returns:
        A fully merged SdxxdConfig instance.

    Raises:
        ConfigError: If a config file or any merged value is invalid.
    """
    config_dict: dict[str, Any] = {
        "dump": DumpSettings().model_dump(),
        "revert": RevertSettings().model_dump(),
        "log_level": LogLevel.WARNING,
    }

    if use_file:
        loader = ConfigLoader()
        file_path = config_path or get_config_path_from_env() or loader.find_config_file()
        if file_path:
            file_config = loader.load(file_path)
            config_dict = _merge_configs(config_dict, file_config.model_dump(exclude_unset=True))

    if use_env:
        config_dict = _merge_configs(config_dict, get_env_overrides())

    try:
        return SdxxdConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
