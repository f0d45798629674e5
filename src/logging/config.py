"""Logging configuration models using Pydantic.

This module defines the configuration schema for the logging service.
All settings can be loaded from environment variables.

Rules Applied:
    - #11 Pydantic Modeling: Settings management, strict types
    - #15 Logging Standards: Configurable console/file sinks
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseSettings):
    """Configuration for the logging service.

    Loaded from environment variables with LOG_ prefix.

    Attributes:
        log_dir: Directory for log files
        console_level: Minimum level for console output
        file_level: Minimum level for file output
        enable_file: Enable the file sink
        json_logs: Enable JSON format for file logs
        rotation: File rotation policy (size or time)
        retention: How long to keep rotated files
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_dir: Path = Field(
        default=Path("logs"),
        description="Directory for log files",
    )

    console_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for console output",
    )
    file_level: LogLevel = Field(
        default="DEBUG",
        description="Minimum level for file output",
    )

    enable_file: bool = Field(
        default=False,
        description="Write logs to files under log_dir",
    )
    json_logs: bool = Field(
        default=True,
        description="Enable JSON serialization for file logs",
    )
    rotation: str = Field(
        default="10 MB",
        description="File rotation policy (e.g., '10 MB', '1 day')",
    )
    retention: str = Field(
        default="7 days",
        description="How long to keep rotated files",
    )

    # Diagnostics (security)
    diagnose: bool = Field(
        default=False,
        description="Enable diagnostic info in tracebacks (disable in prod)",
    )
    backtrace: bool = Field(
        default=True,
        description="Enable full traceback",
    )


@lru_cache
def get_logging_config() -> LoggingConfig:
    """Get cached logging configuration loaded from the environment."""
    return LoggingConfig()
