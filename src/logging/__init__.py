"""Logging service module.

This module provides the logging configuration schema and context binding
helpers used across the prank generator.

Rules Applied:
    - #15 Logging Standards: Loguru, console + file sinks
"""

from src.logging.config import LoggingConfig, get_logging_config
from src.logging.context import get_prank_logger

__all__ = [
    "LoggingConfig",
    "get_logging_config",
    "get_prank_logger",
]
