"""Strategy module for prank strategies.

이 모듈은 프랭크 전략/팩토리의 기반 클래스와 Registry를 제공합니다.
모든 전략은 PrankStrategy를, 모든 팩토리는 StrategyFactory를 상속받아 구현됩니다.

Registry Pattern:
    팩토리 클래스 자체가 Registry 키가 되며, strategy_for()로 전략을 조회합니다.
    새 팩토리를 등록하는 것만으로 동작을 확장할 수 있어 OCP를 준수합니다.

Example:
    >>> from src.strategy import StrategyRegistry, PrankStrategy
    >>> from src.strategy.builtin import PrankStrategyFactory
    >>>
    >>> registry = StrategyRegistry[PrankStrategy]()
    >>> registry.register(PrankStrategyFactory)
    >>> registry.strategy_for(Role.DEVELOPER).generate_prank("Charlie")
    '[CRITICAL ALERT] A fatal error has been detected in your IDE! Error code: APR-001.'
"""

from src.strategy.base import PrankStrategy, StrategyFactory, TemplatePrankStrategy
from src.strategy.registry import StrategyRegistry

__all__ = [
    "PrankStrategy",
    "StrategyFactory",
    "StrategyRegistry",
    "TemplatePrankStrategy",
]
