"""Core module - Single Source of Truth for shared components."""

from src.core.exceptions import (
    ConfigurationError,
    PrankError,
    UnknownRoleError,
)

__all__ = [
    "ConfigurationError",
    "PrankError",
    "UnknownRoleError",
]
