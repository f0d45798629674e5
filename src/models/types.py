"""공용 타입 정의.

이 모듈은 여러 레이어에서 공통으로 사용되는 타입(Enum)을 정의합니다.
Strategy, Generator, CLI 등 다양한 모듈에서 순환 참조 없이 사용할 수 있습니다.

Rules Applied:
    - #10 Python Standards: Modern typing (X | None, list[])
    - #01 Project Structure: Dependency flow (Models can be imported by all layers)
"""

from __future__ import annotations

import random
from enum import StrEnum

from src.core.exceptions import UnknownRoleError


class Role(StrEnum):
    """프랭크 대상 역할 (닫힌 집합).

    전략의 적용 키이자 Registry 조회 식별자로 사용됩니다.
    값은 외부 표기(CLI 입력, 출력)와 동일한 원본 이름입니다.
    """

    EMPLOYEE = "employee"
    MANAGER = "manager"
    DEVELOPER = "developer"
    CORPORATE_PLAYER = "corporatePlayer"
    HR = "hr"
    UXUI = "uxui"

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Role:
        """닫힌 집합에서 균등 확률로 하나의 Role을 선택합니다.

        Args:
            rng: 재현 가능한 샘플링을 위한 Random 인스턴스 (None이면 전역 random)

        Returns:
            무작위 Role
        """
        chooser = rng if rng is not None else random
        return chooser.choice(list(cls))

    @classmethod
    def parse(cls, value: str) -> Role:
        """원본 값 또는 멤버 이름으로 Role을 해석합니다 (대소문자 무시).

        Args:
            value: "corporatePlayer", "corporate_player", "HR" 등

        Returns:
            해석된 Role

        Raises:
            UnknownRoleError: 어떤 Role과도 일치하지 않는 경우
        """
        needle = value.strip().lower()
        for role in cls:
            if needle in (role.value.lower(), role.name.lower()):
                return role
        raise UnknownRoleError(value, context={"valid": ", ".join(r.value for r in cls)})
