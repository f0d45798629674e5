"""Built-in prank strategies and their factory.

Components:
    - EmployeePrankStrategy ... UXUIPrankStrategy: Role별 고정 템플릿 전략
    - PrankStrategyFactory: 모든 Role을 처리하는 기본 팩토리

Example:
    >>> from src.strategy.builtin import PrankStrategyFactory
    >>> strategy = PrankStrategyFactory.create_strategy(Role.HR)
    >>> strategy.generate_prank("Samantha")
    "You're demoted to Standardist!"
"""

from src.strategy.builtin.factory import PrankStrategyFactory
from src.strategy.builtin.strategies import (
    CorporatePlayerPrankStrategy,
    DeveloperPrankStrategy,
    EmployeePrankStrategy,
    HRPrankStrategy,
    ManagerPrankStrategy,
    UXUIPrankStrategy,
)

__all__ = [
    "CorporatePlayerPrankStrategy",
    "DeveloperPrankStrategy",
    "EmployeePrankStrategy",
    "HRPrankStrategy",
    "ManagerPrankStrategy",
    "PrankStrategyFactory",
    "UXUIPrankStrategy",
]
