"""Loguru logging configuration.

This module provides a centralized logging setup following the project's
logging standards (Rules #15). All logging in the application should use
the configured loguru logger.

Features:
    - Console sink (human-readable, stderr)
    - Optional file sink (JSON serialized or text) with rotation
    - Structured logging with context binding

Rules Applied:
    - #15 Logging Standards: Loguru, dual sinks
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from src.logging.config import LoggingConfig, get_logging_config

if TYPE_CHECKING:
    from src.logging.config import LogLevel

# =============================================================================
# Module-level logger (re-exported for convenience)
# =============================================================================

# Records from src.* stay silent until setup_logger*() runs
logger.disable("src")

# =============================================================================
# Console Format Templates
# =============================================================================

CONSOLE_FORMAT_DEFAULT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# =============================================================================
# Setup Functions
# =============================================================================


def setup_logger_from_config(config: LoggingConfig | None = None) -> None:
    """Initialize logger from Pydantic config model.

    This is the recommended way to set up the logger. It loads
    configuration from environment variables if not provided.

    Args:
        config: LoggingConfig instance (loads from env if None)

    Example:
        >>> from src.core.logger import setup_logger_from_config
        >>> setup_logger_from_config()  # Loads from LOG_* env vars
    """
    if config is None:
        config = get_logging_config()

    _setup_logger_internal(config)


def setup_logger(
    log_dir: Path | str = Path("logs"),
    console_level: LogLevel = "WARNING",
    file_level: LogLevel = "DEBUG",
    *,
    enable_file: bool = False,
) -> None:
    """Initialize the logger with minimal configuration.

    Args:
        log_dir: Directory for log files (default: "logs")
        console_level: Console output level (default: "WARNING")
        file_level: File output level (default: "DEBUG")
        enable_file: Write logs to files under log_dir

    Example:
        >>> from src.core.logger import setup_logger, logger
        >>> setup_logger(console_level="DEBUG")
        >>> logger.info("Generator ready")
    """
    config = LoggingConfig(
        log_dir=Path(log_dir),
        console_level=console_level,
        file_level=file_level,
        enable_file=enable_file,
    )
    _setup_logger_internal(config)


def _setup_logger_internal(config: LoggingConfig) -> None:
    """Internal logger setup using config object.

    Args:
        config: LoggingConfig instance with all settings
    """
    logger.remove()
    logger.enable("src")

    # 1. Console Handler (Human-readable)
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT_DEFAULT,
        level=config.console_level,
        colorize=True,
        backtrace=config.backtrace,
        diagnose=config.diagnose,
    )

    # 2. File Handler (optional)
    if config.enable_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        _setup_file_sink(log_path, config)

    logger.debug(
        "Logger initialized",
        console_level=config.console_level,
        file_enabled=config.enable_file,
    )


def _setup_file_sink(log_path: Path, config: LoggingConfig) -> None:
    """Set up file sink with loguru's built-in rotation.

    Args:
        log_path: Path to log directory
        config: Logging configuration
    """
    if config.json_logs:
        logger.add(
            log_path / "pranks_{time:YYYY-MM-DD}.json",
            format="{message}",
            level=config.file_level,
            serialize=True,
            rotation=config.rotation,
            retention=config.retention,
            backtrace=config.backtrace,
            diagnose=False,
        )
        return

    logger.add(
        log_path / "pranks_{time:YYYY-MM-DD}.log",
        format=CONSOLE_FORMAT_DEFAULT,
        level=config.file_level,
        rotation=config.rotation,
        retention=config.retention,
        backtrace=config.backtrace,
        diagnose=False,
    )


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "logger",
    "setup_logger",
    "setup_logger_from_config",
]
