"""Role StrEnum 테스트."""

import random

import pytest

from src.core.exceptions import UnknownRoleError
from src.models.types import Role


class TestRoleValues:
    def test_closed_set(self) -> None:
        assert len(Role) == 6

    def test_raw_values(self) -> None:
        assert [r.value for r in Role] == [
            "employee",
            "manager",
            "developer",
            "corporatePlayer",
            "hr",
            "uxui",
        ]

    def test_str_formatting_uses_raw_value(self) -> None:
        assert f"{Role.CORPORATE_PLAYER}" == "corporatePlayer"


class TestRoleRandom:
    def test_always_member_of_closed_set(self) -> None:
        """반복 샘플링 시 집합 밖의 값이 나오지 않음."""
        for _ in range(500):
            assert Role.random() in set(Role)

    def test_seeded_rng_is_reproducible(self) -> None:
        first = [Role.random(random.Random(7)) for _ in range(3)]
        second = [Role.random(random.Random(7)) for _ in range(3)]
        assert first == second

    def test_covers_all_roles(self) -> None:
        rng = random.Random(0)
        seen = {Role.random(rng) for _ in range(1000)}
        assert seen == set(Role)


class TestRoleParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("employee", Role.EMPLOYEE),
            ("corporatePlayer", Role.CORPORATE_PLAYER),
            ("corporate_player", Role.CORPORATE_PLAYER),
            ("HR", Role.HR),
            ("  uxui ", Role.UXUI),
        ],
    )
    def test_parse(self, raw: str, expected: Role) -> None:
        assert Role.parse(raw) is expected

    def test_unknown_role_raises(self) -> None:
        with pytest.raises(UnknownRoleError) as exc_info:
            Role.parse("ceo")
        assert exc_info.value.value == "ceo"
        assert "employee" in str(exc_info.value)

    def test_unknown_role_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown role"):
            Role.parse("")
