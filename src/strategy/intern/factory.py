"""Intern prank factory (employee 전용)."""

from __future__ import annotations

from collections.abc import Hashable

from src.models.types import Role
from src.strategy.base import PrankStrategy, StrategyFactory
from src.strategy.intern.strategy import InternPrankStrategy


class InternPrankFactory(StrategyFactory[PrankStrategy]):
    @classmethod
    def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
        if identifier is Role.EMPLOYEE:
            return InternPrankStrategy()
        return None
