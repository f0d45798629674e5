"""Tests for StrategyRegistry."""

from __future__ import annotations

from collections.abc import Hashable

import pytest

from src.models.types import Role
from src.strategy.base import PrankStrategy, StrategyFactory
from src.strategy.builtin import EmployeePrankStrategy, HRPrankStrategy, PrankStrategyFactory
from src.strategy.intern import InternPrankFactory, InternPrankStrategy
from src.strategy.registry import StrategyRegistry


class NothingFactory(StrategyFactory[PrankStrategy]):
    """어떤 식별자에도 응답하지 않는 팩토리."""

    @classmethod
    def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
        return None


class EverythingIsHRFactory(StrategyFactory[PrankStrategy]):
    """모든 식별자에 HR 전략을 반환하는 광범위 팩토리."""

    @classmethod
    def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
        return HRPrankStrategy()


@pytest.fixture
def registry() -> StrategyRegistry[PrankStrategy]:
    return StrategyRegistry[PrankStrategy]()


class TestRegistration:
    def test_empty_registry_resolves_nothing(self, registry: StrategyRegistry[PrankStrategy]):
        assert len(registry) == 0
        assert registry.strategy_for(Role.EMPLOYEE) is None

    def test_register(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)

        assert PrankStrategyFactory in registry
        assert registry.is_registered(PrankStrategyFactory)
        assert not registry.is_registered(InternPrankFactory)
        assert len(registry) == 1

    def test_reregister_overwrites_without_duplicating(
        self, registry: StrategyRegistry[PrankStrategy]
    ):
        """같은 팩토리 재등록은 덮어쓰기 (리스트가 아닌 맵 의미론)."""
        registry.register(PrankStrategyFactory)
        registry.register(PrankStrategyFactory)
        assert len(registry) == 1

    def test_reregister_replaces_stored_resolver(
        self, registry: StrategyRegistry[PrankStrategy]
    ):
        """재등록 시 저장된 해석 함수가 새 정의로 교체됨."""

        class SwitchableFactory(StrategyFactory[PrankStrategy]):
            @classmethod
            def create_strategy(cls, identifier: Hashable) -> PrankStrategy | None:
                return None

        registry.register(SwitchableFactory)
        assert registry.strategy_for(Role.HR) is None

        def answer_hr(cls, identifier: Hashable) -> PrankStrategy | None:
            return HRPrankStrategy()

        SwitchableFactory.create_strategy = classmethod(answer_hr)  # type: ignore[method-assign]

        # 이전에 저장된 해석 함수는 재등록 전까지 그대로 사용됨
        assert registry.strategy_for(Role.HR) is None

        registry.register(SwitchableFactory)
        assert registry.strategy_for(Role.HR) == HRPrankStrategy()
        assert len(registry) == 1

    def test_distinct_factory_definitions_are_distinct_keys(
        self, registry: StrategyRegistry[PrankStrategy]
    ):
        """같은 식별자를 처리하더라도 다른 팩토리 정의는 별도 항목."""
        registry.register(PrankStrategyFactory)
        registry.register(InternPrankFactory)
        assert len(registry) == 2

    def test_unregister(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)

        assert registry.unregister(PrankStrategyFactory) is True
        assert registry.unregister(PrankStrategyFactory) is False
        assert registry.strategy_for(Role.EMPLOYEE) is None

    def test_clear(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)
        registry.register(InternPrankFactory)
        registry.clear()
        assert len(registry) == 0


class TestResolution:
    def test_first_non_none_result(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)
        registry.register(NothingFactory)

        assert registry.strategy_for(Role.MANAGER) is not None

    def test_no_factory_answers(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(NothingFactory)
        assert registry.strategy_for(Role.EMPLOYEE) is None

    def test_unmatched_identifier(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)
        assert registry.strategy_for("not-a-role") is None

    def test_last_registered_wins_on_overlap(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)
        assert registry.strategy_for(Role.EMPLOYEE) == EmployeePrankStrategy()

        registry.register(InternPrankFactory)
        assert registry.strategy_for(Role.EMPLOYEE) == InternPrankStrategy()

    def test_non_overlapping_identifiers_fall_through(
        self, registry: StrategyRegistry[PrankStrategy]
    ):
        """나중 팩토리가 응답하지 않으면 이전 팩토리로 넘어감."""
        registry.register(PrankStrategyFactory)
        registry.register(InternPrankFactory)

        strategy = registry.strategy_for(Role.MANAGER)
        assert strategy is not None
        assert strategy.supported_role is Role.MANAGER

    def test_reregister_keeps_precedence(self, registry: StrategyRegistry[PrankStrategy]):
        """재등록은 기존 위치를 유지하므로 우선순위가 바뀌지 않음."""
        registry.register(PrankStrategyFactory)
        registry.register(InternPrankFactory)
        registry.register(PrankStrategyFactory)

        assert registry.list_factories() == [InternPrankFactory, PrankStrategyFactory]
        assert registry.strategy_for(Role.EMPLOYEE) == InternPrankStrategy()

    def test_broad_factory_answers_any_identifier(
        self, registry: StrategyRegistry[PrankStrategy]
    ):
        registry.register(EverythingIsHRFactory)
        assert registry.strategy_for(42) == HRPrankStrategy()

    def test_list_factories_in_precedence_order(self, registry: StrategyRegistry[PrankStrategy]):
        registry.register(PrankStrategyFactory)
        registry.register(NothingFactory)
        registry.register(InternPrankFactory)

        assert registry.list_factories() == [
            InternPrankFactory,
            NothingFactory,
            PrankStrategyFactory,
        ]
