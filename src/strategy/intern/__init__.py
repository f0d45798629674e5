"""Intern prank extension.

기존 Role(employee)을 재사용하는 확장 전략 예시입니다.
PrankGenerator.register_strategy_factory()로 주입하면 employee 조회 시
기본 전략보다 우선합니다.

Example:
    >>> from src.strategy.intern import InternPrankFactory
    >>> generator = PrankGenerator()
    >>> generator.register_strategy_factory(InternPrankFactory)
    >>> generator.generate_prank("Intern Alice", Role.EMPLOYEE)
    'Hey Intern Alice, the CEO wants you to get coffee for the entire department!'
"""

from src.strategy.intern.factory import InternPrankFactory
from src.strategy.intern.strategy import InternPrankStrategy

__all__ = [
    "InternPrankFactory",
    "InternPrankStrategy",
]
