"""Custom exception hierarchy for the prank generator.

Core resolution never raises: "no match" is represented as ``None`` by
factories and the registry, and absorbed into the default prank by the
generator. Exceptions exist only at the edges (configuration loading and
user input parsing).

Rules Applied:
    - #23 Exception Handling: Domain-driven hierarchy
"""


class PrankError(Exception):
    """모든 프랭크 관련 예외의 기본 클래스.

    이 예외를 직접 발생시키지 말고, 하위 클래스를 사용하세요.

    Attributes:
        message: 에러 메시지
        context: 추가 컨텍스트 정보 (디버깅용)
    """

    def __init__(
        self, message: str, *, context: dict[str, object] | None = None
    ) -> None:
        """PrankError 초기화.

        Args:
            message: 에러 메시지
            context: 추가 컨텍스트 정보 (선택)
        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = context or {}

    def __str__(self) -> str:
        """에러 메시지와 컨텍스트를 포함한 문자열 반환."""
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


# =============================================================================
# Configuration Errors (Unrecoverable - Fail Fast)
# =============================================================================


class ConfigurationError(PrankError):
    """설정 오류 (잘못된 환경 변수, 빈 기본 프랭크 등).

    Example:
        >>> raise ConfigurationError(
        ...     "Default prank must not be blank",
        ...     context={"env": "PRANK_DEFAULT_PRANK"}
        ... )
    """


# =============================================================================
# Input Errors (Unrecoverable - Report to user)
# =============================================================================


class UnknownRoleError(PrankError, ValueError):
    """Role 이름으로 해석할 수 없는 입력.

    ValueError를 함께 상속하므로 Enum 조회 실패와 동일하게 처리할 수 있습니다.

    Attributes:
        value: 해석에 실패한 원본 입력
    """

    def __init__(self, value: str, *, context: dict[str, object] | None = None) -> None:
        """UnknownRoleError 초기화.

        Args:
            value: 해석에 실패한 원본 입력
            context: 추가 컨텍스트 정보
        """
        super().__init__(f"Unknown role: '{value}'", context=context)
        self.value = value
