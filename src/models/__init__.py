"""Shared data types."""

from src.models.types import Role

__all__ = [
    "Role",
]
