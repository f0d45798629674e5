"""Shared fixtures for tests.

이 모듈은 테스트에서 공통으로 사용되는 픽스처를 제공합니다.

Rules Applied:
    - #17 Testing Standards: Pytest fixtures
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from src.config.settings import get_default_prank, get_settings
from src.generator import PrankGenerator
from src.logging.config import get_logging_config

# ---------------------------------------------------------------------------
# 디렉토리 경로 → pytest 마커 자동 매핑
# ---------------------------------------------------------------------------
_DIR_MARKER_MAP: dict[str, str] = {
    "/strategy/": "strategy",
    "/generator/": "strategy",
    "/cli/": "integration",
    "/core/": "unit",
    "/models/": "unit",
    "/config/": "unit",
    "/logging/": "unit",
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """디렉토리 경로 기반 자동 마커 부여."""
    for item in items:
        fspath = str(item.fspath)
        for dir_pattern, marker_name in _DIR_MARKER_MAP.items():
            if dir_pattern in fspath:
                item.add_marker(getattr(pytest.mark, marker_name))
                break


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """환경 변수 기반 설정 캐시와 loguru 핸들러를 테스트마다 초기화."""
    for var in ("PRANK_DEFAULT_PRANK", "PRANK_RANDOM_EXAMPLES", "PRANK_SEED"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_default_prank.cache_clear()
    get_logging_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_prank.cache_clear()
    get_logging_config.cache_clear()
    logger.remove()
    logger.disable("src")


@pytest.fixture
def generator() -> PrankGenerator:
    """기본 팩토리만 등록된 PrankGenerator."""
    return PrankGenerator()
