"""Context binding utilities for structured logging.

Rules Applied:
    - #15 Logging Standards: Context binding with logger.bind()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger


def get_prank_logger(
    *,
    role: str | None = None,
    factory: str | None = None,
    **extra: str,
) -> Logger:
    """Get a logger with prank context bound.

    Args:
        role: Role value (e.g., "employee", "corporatePlayer")
        factory: Strategy factory name (e.g., "InternPrankFactory")
        **extra: Additional context key-value pairs

    Returns:
        Logger instance with context bound

    Example:
        >>> log = get_prank_logger(role="employee")
        >>> log.debug("No strategy matched, using default prank")
        # Output includes: {"role": "employee", ...}
    """
    ctx: dict[str, str] = {}
    if role:
        ctx["role"] = role
    if factory:
        ctx["factory"] = factory
    ctx.update(extra)
    return logger.bind(**ctx)
