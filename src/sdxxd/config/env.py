"""Environment variable mapping for sdxxd configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

# Environment variable names
ENV_CONFIG_PATH = "SDXXD_CONFIG_PATH"
ENV_LOG_LEVEL = "SDXXD_LOG_LEVEL"
ENV_READ_BUFFER_SIZE = "SDXXD_READ_BUFFER_SIZE"
ENV_REVERT_BATCH_SIZE = "SDXXD_REVERT_BATCH_SIZE"

# Variable name -> (config section, key); None for top-level keys
_ENV_MAPPINGS = {
    ENV_READ_BUFFER_SIZE: ("dump", "read_buffer_size"),
    ENV_REVERT_BATCH_SIZE: ("revert", "batch_size"),
    ENV_LOG_LEVEL: (None, "log_level"),
}


def get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables.

    Values are passed through as text; the schema parses and validates
    them together with every other source.

    Returns:
        Nested dictionary of configuration values that can be merged
        with other config sources.
    """
    overrides: dict[str, Any] = {}

    for name, (section, key) in _ENV_MAPPINGS.items():
        if name not in os.environ:
            continue
        if section is None:
            overrides[key] = os.environ[name]
        else:
            overrides.setdefault(section, {})[key] = os.environ[name]

    return overrides


def get_config_path_from_env() -> Path | None:
    """Get the config file path from environment variable, if it exists."""
    if ENV_CONFIG_PATH in os.environ:
        path = Path(os.environ[ENV_CONFIG_PATH])
        if path.exists():
            return path
    return None
