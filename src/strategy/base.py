"""PrankStrategy / StrategyFactory ABC (Abstract Base Classes).

이 모듈은 모든 프랭크 전략과 전략 팩토리가 구현해야 하는 추상 기반 클래스를 정의합니다.
Registry는 팩토리 클래스 자체(타입 식별자)를 키로 사용하므로,
팩토리는 인스턴스를 만들지 않고 classmethod로만 동작합니다.

Rules Applied:
    - #10 Python Standards: Modern typing, ABC pattern
    - #02 Clean Code: Open-Closed Principle via factories
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from src.models.types import Role


class PrankStrategy(ABC):
    """모든 프랭크 전략이 구현해야 하는 추상 기반 클래스.

    Stateless 설계 원칙에 따라, 전략은 이름만 입력받고 문자열만 출력합니다.
    supported_role은 조회용 메타데이터이며 출력 텍스트에는 사용되지 않습니다.

    Example:
        >>> class MyStrategy(PrankStrategy):
        ...     @property
        ...     def supported_role(self) -> Role:
        ...         return Role.HR
        ...
        ...     def generate_prank(self, name: str) -> str:
        ...         return f"{name}, your badge has expired."
    """

    @property
    @abstractmethod
    def supported_role(self) -> Role:
        """전략이 대상으로 하는 Role."""
        ...

    @abstractmethod
    def generate_prank(self, name: str) -> str:
        """이름에 대한 프랭크 문구 생성.

        Important:
            - 모든 문자열(빈 문자열 포함)에 대해 예외 없이 동작해야 함
            - 이름은 이스케이프 없이 그대로 삽입

        Args:
            name: 대상 이름

        Returns:
            프랭크 문구
        """
        ...

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(supported_role={self.supported_role.value!r})"


class TemplatePrankStrategy(PrankStrategy):
    """고정 템플릿 기반 전략.

    서브클래스는 ``role``과 ``template`` 클래스 속성만 정의합니다.
    ``{name}`` 자리표시자만 그대로 치환되며, 그 밖의 중괄호는
    템플릿과 이름 모두에서 리터럴로 남습니다.
    """

    role: ClassVar[Role]
    template: ClassVar[str]

    @property
    def supported_role(self) -> Role:
        return self.role

    def generate_prank(self, name: str) -> str:
        return self.template.replace("{name}", name)


class StrategyFactory[T](ABC):
    """식별자 → 전략 인스턴스 (또는 None) 해석기.

    팩토리는 상태가 없는 타입 수준 싱글톤입니다. 인스턴스를 생성하지 않으며,
    Registry에는 클래스 자체가 등록됩니다. 서로 다른 팩토리 정의는
    같은 식별자를 처리하더라도 항상 서로 다른 키가 됩니다.

    Example:
        >>> class HRFactory(StrategyFactory[PrankStrategy]):
        ...     @classmethod
        ...     def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
        ...         return MyStrategy() if identifier == Role.HR else None
    """

    def __new__(cls, *args: object, **kwargs: object) -> StrategyFactory[T]:
        msg = f"{cls.__name__} is a type-level factory; register the class itself"
        raise TypeError(msg)

    @classmethod
    @abstractmethod
    def create_strategy(cls, identifier: Hashable) -> T | None:
        """식별자에 대응하는 전략을 반환합니다.

        Important:
            - 예외를 발생시키지 않음 (불일치 시 None 반환)
            - 부수 효과 없음

        Args:
            identifier: 임의의 해시 가능한 식별자 (보통 Role)

        Returns:
            전략 인스턴스 또는 None
        """
        ...
