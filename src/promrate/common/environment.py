# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-variable driven settings.

Settings are grouped by concern and read once at import time. Every value can
be overridden with a ``PROMRATE_<GROUP>_<NAME>`` environment variable, e.g.
``PROMRATE_LOGGING_LEVEL=DEBUG``.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelT = Literal["TRACE", "DEBUG", "INFO", "NOTICE", "WARNING", "ERROR", "CRITICAL"]


class _LoggingSettings(BaseSettings):
    """Console logging settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="PROMRATE_LOGGING_",
    )

    LEVEL: LogLevelT = Field(
        default="WARNING", description="Root log level for the command line"
    )
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=1000, ge=1, description="Console messages are truncated to this length"
    )
    DEFAULT_CONSOLE_WIDTH: int = Field(
        default=120, ge=40, description="Console width used when none is detected"
    )
    MIN_CONSOLE_INDENT_WRAP_WIDTH: int = Field(
        default=90,
        ge=0,
        description="Minimum console width for indenting wrapped continuation lines",
    )

    @field_validator("LEVEL", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class _Environment(BaseSettings):
    """Root settings object grouping all settings by concern."""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="PROMRATE_")

    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
