# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen
"""
Configuration for logzen loggers.

Settings are loaded from environment variables prefixed with ``LOGZEN_`` and
can be overridden per logger with keyword arguments.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logzen.level import LogLevel

DEFAULT_FORMAT = "($time) [$prefix$level] $message"


class LoggerSettings(BaseSettings):
    """
    Configuration settings for a logzen Logger.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGZEN_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    attach_global_console: bool = Field(
        default=True, description="Attach the ambient console at construction"
    )
    retain_logs: bool = Field(default=True, description="Retain entries in memory")
    allow_clearing: bool = Field(
        default=True, description="Allow clearing retained entries"
    )
    format: str = Field(default=DEFAULT_FORMAT, description="Entry template")
    prefix: str | None = Field(
        default=None, description="Prefix applied to bare-string sends"
    )
    default_level: LogLevel = Field(
        default=LogLevel.LOG, description="Level applied to bare-string sends"
    )

    @field_validator("default_level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        """Accept level names case-insensitively."""
        if isinstance(v, LogLevel):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v)

    @field_validator("prefix")
    @classmethod
    def empty_prefix_is_none(cls, v: str | None) -> str | None:
        return v or None

    @classmethod
    def load(cls, **overrides: Any) -> LoggerSettings:
        """
        Load settings from environment variables or defaults.

        Args:
            **overrides: Field values taking precedence over the environment

        Returns:
            LoggerSettings: Loaded and validated settings instance.
        """
        return cls(**overrides)
