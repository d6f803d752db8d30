"""Configuration schema definitions using Pydantic Settings."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from sdxxd.core.decoder import BATCH_SIZE
from sdxxd.core.encoder import READ_BUFFER_SIZE


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DumpSettings(BaseModel):
    """Settings for hex dump generation."""

    read_buffer_size: int = Field(
        default=READ_BUFFER_SIZE,
        ge=1,
        description="Target size in bytes of one file read (rounded up to whole rows)",
    )

    @field_validator("read_buffer_size", mode="before")
    @classmethod
    def parse_buffer_size(cls, v: Any) -> int:
        """Parse buffer size from string format (e.g., '4K', '1KB')."""
        if isinstance(v, str):
            v = v.strip().upper()
            multipliers = {
                "B": 1,
                "K": 1024,
                "KB": 1024,
                "M": 1024 * 1024,
                "MB": 1024 * 1024,
            }
            for suffix, mult in sorted(multipliers.items(), key=lambda x: -len(x[0])):
                if v.endswith(suffix):
                    return int(float(v[: -len(suffix)]) * mult)
            return int(v)
        return int(v) if v is not None else READ_BUFFER_SIZE


class RevertSettings(BaseModel):
    """Settings for turning dumps back into binary."""

    batch_size: int = Field(
        default=BATCH_SIZE,
        ge=2,
        description="Hex digits accumulated before a batch is decoded and written",
    )


class SdxxdConfig(BaseSettings):
    """Main configuration for sdxxd.

    Values come only from keyword arguments. Environment variables are
    layered in by sdxxd.config under their documented names, so building
    this model never reads the environment itself.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    dump: DumpSettings = Field(
        default_factory=DumpSettings,
        description="Dump settings",
    )
    revert: RevertSettings = Field(
        default_factory=RevertSettings,
        description="Revert settings",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> LogLevel:
        """Validate and normalize log level."""
        if v is None:
            return LogLevel.WARNING
        if isinstance(v, LogLevel):
            return v
        v = str(v).lower()
        try:
            return LogLevel(v)
        except ValueError:
            valid = ", ".join(level.value for level in LogLevel)
            raise ValueError(f"log_level must be one of: {valid}")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)
