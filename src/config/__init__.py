"""Configuration management with Pydantic Settings."""

from src.config.settings import (
    DEFAULT_PRANK,
    GeneratorSettings,
    PrankSettings,
    get_default_prank,
    get_settings,
)

__all__ = [
    "DEFAULT_PRANK",
    "GeneratorSettings",
    "PrankSettings",
    "get_default_prank",
    "get_settings",
]
