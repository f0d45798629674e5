"""PrankGenerator facade.

이 모듈은 Registry를 감싸는 단일 공개 진입점을 제공합니다.
생성 시 기본 팩토리(PrankStrategyFactory)가 등록된 새 Registry를 만들며,
어떤 팩토리도 응답하지 않으면 설정된 기본 문구를 반환합니다.

Rules Applied:
    - #02 Clean Code: Facade over Registry, OCP via factory injection
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.config.settings import get_default_prank
from src.logging.context import get_prank_logger
from src.strategy.base import PrankStrategy, StrategyFactory
from src.strategy.builtin import PrankStrategyFactory
from src.strategy.registry import StrategyRegistry

if TYPE_CHECKING:
    from src.models.types import Role


class PrankGenerator:
    """이름과 Role로 프랭크 문구를 생성하는 Facade.

    각 인스턴스는 자신만의 Registry를 소유하므로, 한 생성기에 팩토리를
    등록해도 다른 생성기에는 영향을 주지 않습니다.

    Example:
        >>> generator = PrankGenerator()
        >>> generator.generate_prank("Bob", Role.MANAGER)
        'URGENT: Surprise meeting with the CEO in 5 minutes. Prepare a presentation!'
        >>> generator.register_strategy_factory(InternPrankFactory)
        >>> generator.generate_prank("Intern", Role.EMPLOYEE)
        'Hey Intern, the CEO wants you to get coffee for the entire department!'
    """

    def __init__(self, default_prank: str | None = None) -> None:
        """PrankGenerator 초기화.

        Args:
            default_prank: 일치하는 전략이 없을 때 반환할 문구
                (None이면 PRANK_DEFAULT_PRANK, 없거나 유효하지 않으면 "April Fools!")
        """
        if default_prank is None:
            default_prank = get_default_prank()

        self._default_prank = default_prank
        self._registry: StrategyRegistry[PrankStrategy] = StrategyRegistry()
        self._registry.register(PrankStrategyFactory)

    @property
    def default_prank(self) -> str:
        return self._default_prank

    def register_strategy_factory(self, factory: type[StrategyFactory[PrankStrategy]]) -> None:
        """추가 팩토리를 등록합니다.

        새로 등록된 팩토리는 기존 팩토리보다 먼저 조회됩니다.

        Args:
            factory: StrategyFactory 서브클래스
        """
        self._registry.register(factory)

    def registered_factories(self) -> list[type[StrategyFactory[PrankStrategy]]]:
        """등록된 팩토리 목록 (조회 우선순위 순)."""
        return self._registry.list_factories()

    def generate_prank(self, name: str, role: Role) -> str:
        """프랭크 문구를 생성합니다.

        Args:
            name: 대상 이름 (이스케이프 없이 그대로 삽입)
            role: 대상 Role

        Returns:
            전략이 생성한 문구, 일치하는 전략이 없으면 기본 문구
        """
        strategy = self._registry.strategy_for(role)
        if strategy is None:
            get_prank_logger(role=str(role)).debug("No strategy matched, using default prank")
            return self._default_prank
        return strategy.generate_prank(name)
