"""Built-in prank strategy factory.

모든 Role에 대해 기본 전략을 반환합니다. ``match`` 문은 ``assert_never``로
닫혀 있어, Role에 새 멤버가 추가되면 타입 체커가 누락을 보고합니다.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import assert_never

from src.models.types import Role
from src.strategy.base import PrankStrategy, StrategyFactory
from src.strategy.builtin.strategies import (
    CorporatePlayerPrankStrategy,
    DeveloperPrankStrategy,
    EmployeePrankStrategy,
    HRPrankStrategy,
    ManagerPrankStrategy,
    UXUIPrankStrategy,
)


class PrankStrategyFactory(StrategyFactory[PrankStrategy]):
    """Role → 기본 프랭크 전략 (Role이 아닌 식별자는 None)."""

    @classmethod
    def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
        if not isinstance(identifier, Role):
            return None

        match identifier:
            case Role.EMPLOYEE:
                return EmployeePrankStrategy()
            case Role.MANAGER:
                return ManagerPrankStrategy()
            case Role.DEVELOPER:
                return DeveloperPrankStrategy()
            case Role.CORPORATE_PLAYER:
                return CorporatePlayerPrankStrategy()
            case Role.HR:
                return HRPrankStrategy()
            case Role.UXUI:
                return UXUIPrankStrategy()
            case _:
                assert_never(identifier)
