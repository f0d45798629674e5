"""Pydantic Settings for configuration management.

This module provides centralized configuration management using
pydantic-settings. All settings are loaded from environment variables
and/or .env files with type validation.

Features:
    - Default prank text used when no strategy answers a role
    - Demo driver parameters (random example count, seed)
    - Environment variable loading from .env

The generator reads only ``GeneratorSettings`` so that invalid demo
parameters never reach the core.

Rules Applied:
    - #11 Pydantic Modeling: BaseSettings, field validators
"""

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError
from src.core.logger import logger

DEFAULT_PRANK = "April Fools!"


class GeneratorSettings(BaseSettings):
    """PrankGenerator가 사용하는 설정 (기본 문구만).

    Environment Variables:
        - PRANK_DEFAULT_PRANK: 일치하는 전략이 없을 때 사용할 문구 (기본: April Fools!)
    """

    model_config = SettingsConfigDict(
        env_prefix="PRANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 알 수 없는 환경 변수 무시
    )

    default_prank: str = Field(
        default=DEFAULT_PRANK,
        description="일치하는 전략이 없을 때 반환할 기본 문구",
    )

    @field_validator("default_prank")
    @classmethod
    def validate_default_prank(cls, v: str) -> str:
        """기본 문구가 공백만으로 이루어지지 않았는지 검증."""
        if not v.strip():
            msg = "default_prank must not be blank"
            raise ValueError(msg)
        return v


class PrankSettings(GeneratorSettings):
    """프랭크 생성기 + CLI 데모 설정.

    환경 변수 또는 .env 파일에서 설정을 로드합니다.

    Environment Variables:
        - PRANK_DEFAULT_PRANK: 일치하는 전략이 없을 때 사용할 문구 (기본: April Fools!)
        - PRANK_RANDOM_EXAMPLES: 데모의 무작위 예시 개수 (기본: 10)
        - PRANK_SEED: 무작위 Role 선택 시드 (기본: 없음)

    Example:
        >>> settings = get_settings()
        >>> print(settings.random_examples)
        10
    """

    random_examples: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="데모에서 출력할 무작위 Role 예시 개수",
    )
    seed: int | None = Field(
        default=None,
        description="무작위 Role 선택 시드 (재현용)",
    )


@lru_cache
def get_settings() -> PrankSettings:
    """CLI용 설정 싱글톤을 반환합니다.

    Returns:
        PrankSettings 인스턴스 (캐시됨)

    Raises:
        ConfigurationError: 환경 변수 검증 실패 시
    """
    try:
        return PrankSettings()
    except ValidationError as e:
        msg = "Invalid prank settings"
        raise ConfigurationError(msg, context={"errors": e.error_count()}) from e


@lru_cache
def get_default_prank() -> str:
    """PrankGenerator의 기본 문구를 반환합니다.

    PRANK_DEFAULT_PRANK만 읽으며, 값이 유효하지 않으면 경고 후
    DEFAULT_PRANK를 사용합니다. 생성기 생성은 실패하지 않습니다.

    Returns:
        기본 문구 (캐시됨)
    """
    try:
        return GeneratorSettings().default_prank
    except ValidationError as e:
        logger.warning(
            "Invalid PRANK_DEFAULT_PRANK, using built-in default",
            errors=e.error_count(),
            fallback=DEFAULT_PRANK,
        )
        return DEFAULT_PRANK
