"""Configuration file discovery and parsing.

A config file is YAML, TOML or JSON, chosen by suffix. Discovery walks
from the working directory up to the filesystem root, then tries the
user-level config directory.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sdxxd.config.schema import SdxxdConfig
from sdxxd.core.exceptions import ConfigError

# Config file names to search for (in order of preference)
CONFIG_FILE_NAMES = [
    ".sdxxd.yml",
    ".sdxxd.yaml",
    ".sdxxd.toml",
    "sdxxd.config.json",
]

USER_CONFIG_DIR = Path.home() / ".config" / "sdxxd"


class ConfigLoader:
    """Finds and parses sdxxd configuration files."""

    def find_config_file(self, start_path: Path | None = None) -> Path | None:
        """Return the first config file in ``start_path`` (or cwd), its parents or the user dir."""
        start = Path(start_path).resolve() if start_path else Path.cwd()

        for directory in [start, *start.parents, USER_CONFIG_DIR]:
            for name in CONFIG_FILE_NAMES:
                candidate = directory / name
                if candidate.is_file():
                    return candidate
        return None

    def load(self, path: Path | str) -> SdxxdConfig:
        """Load and validate a configuration file.

        Args:
            path: Path to the configuration file.

        Returns:
            An SdxxdConfig holding only the values the file sets.

        Raises:
            ConfigError: If the file is missing, unreadable, malformed or
                holds invalid values.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if not path.is_file():
            raise ConfigError(f"Configuration path is not a file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read config file {path}: {e}") from e

        data = self._parse(content, path)
        try:
            return SdxxdConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    def _parse(self, content: str, path: Path) -> dict[str, Any]:
        suffix = path.suffix.lower()
        try:
            if suffix in (".yml", ".yaml"):
                data = yaml.safe_load(content)
            elif suffix == ".toml":
                data = tomllib.loads(content)
            else:
                data = json.loads(content)
        except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping, got: {type(data).__name__}")
        return data
