"""Strategy Registry for pluggable strategy resolution.

이 모듈은 전략 팩토리를 타입 식별자로 등록하고, 런타임 식별자(Role)로
전략 인스턴스를 조회하는 Registry를 제공합니다.
호출자와 전략 구현 간의 결합도를 제거하여 OCP(Open-Closed Principle)를 준수합니다.

Precedence:
    팩토리는 등록 순서대로 저장되며, 조회 시 가장 최근에 등록된 팩토리부터
    확인합니다 (last-registered-wins). 이미 등록된 팩토리를 다시 등록하면
    해석 함수만 교체되고 기존 위치(우선순위)는 유지됩니다.

Rules Applied:
    - #02 Clean Code: Dependency Inversion via Registry
    - #10 Python Standards: Modern typing
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from src.core.logger import logger

if TYPE_CHECKING:
    from src.strategy.base import StrategyFactory

type Resolver[T] = Callable[[Hashable], T | None]


class StrategyRegistry[T]:
    """팩토리 식별자 → 해석 함수 매핑.

    하나의 소유자(PrankGenerator)에 의해서만 사용되며, 내부 동기화를 제공하지 않습니다.
    여러 스레드에서 사용할 경우 호출자가 직접 직렬화해야 합니다.

    Example:
        >>> registry = StrategyRegistry[PrankStrategy]()
        >>> registry.register(PrankStrategyFactory)
        >>> registry.strategy_for(Role.MANAGER)
        ManagerPrankStrategy(supported_role='manager')
    """

    def __init__(self) -> None:
        self._factories: dict[type[StrategyFactory[T]], Resolver[T]] = {}

    def register(self, factory: type[StrategyFactory[T]]) -> None:
        """팩토리를 등록합니다.

        같은 팩토리를 다시 등록하면 해석 함수만 덮어쓰며 순서는 바뀌지 않습니다.

        Args:
            factory: StrategyFactory 서브클래스 (인스턴스가 아닌 클래스)
        """
        replaced = factory in self._factories
        self._factories[factory] = factory.create_strategy
        logger.debug(
            "Strategy factory registered",
            factory=factory.__name__,
            replaced=replaced,
            total=len(self._factories),
        )

    def unregister(self, factory: type[StrategyFactory[T]]) -> bool:
        """팩토리 등록을 해제합니다.

        Returns:
            등록되어 있었으면 True
        """
        if self._factories.pop(factory, None) is None:
            return False
        logger.debug("Strategy factory unregistered", factory=factory.__name__)
        return True

    def strategy_for(self, identifier: Hashable) -> T | None:
        """식별자에 대응하는 첫 번째 전략을 반환합니다.

        가장 최근에 등록된 팩토리부터 확인하여 None이 아닌 첫 결과를 반환합니다.

        Args:
            identifier: 조회 식별자 (보통 Role)

        Returns:
            전략 인스턴스, 어떤 팩토리도 응답하지 않으면 None
        """
        for resolve in reversed(self._factories.values()):
            strategy = resolve(identifier)
            if strategy is not None:
                return strategy
        return None

    def is_registered(self, factory: type[StrategyFactory[T]]) -> bool:
        return factory in self._factories

    def list_factories(self) -> list[type[StrategyFactory[T]]]:
        """등록된 팩토리 목록 (조회 우선순위 순)."""
        return list(reversed(self._factories.keys()))

    def clear(self) -> None:
        """레지스트리를 초기화합니다."""
        self._factories.clear()

    def __contains__(self, factory: object) -> bool:
        return factory in self._factories

    def __len__(self) -> int:
        return len(self._factories)
