"""
core/exceptions.py - 통합 예외 계층 구조

리소스 탐색 엔진에서 사용하는 예외 클래스와 에러 분류 유틸리티를 정의합니다.

예외 계층 구조:
    DiscoveryEngineError (베이스)
    ├── ConfigurationError      (클라이언트/세션 구성 실패 - Step 실행 전)
    ├── GeneratorNotFoundError  (레지스트리에 없는 provider/service)
    ├── GeneratorStateError     (재사용 불가 Generator의 중복 실행)
    └── CursorStateError        (실패/종료된 커서의 advance 호출)

원격 API 오류(botocore ClientError, requests.HTTPError 등)는 이 계층으로
래핑하지 않고 원본 그대로 Err 결과에 담겨 전달됩니다. 아래의 분류 함수들은
원본 예외를 그대로 받아 로깅과 요약에만 사용합니다.

Usage:
    from core.exceptions import ConfigurationError, categorize_error

    result = generator.discover()
    if result.is_err():
        print(categorize_error(result.error).value)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class DiscoveryEngineError(Exception):
    """리소스 탐색 엔진 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


class ConfigurationError(DiscoveryEngineError):
    """클라이언트/세션 구성 실패

    Generator에 전달된 클라이언트 팩토리가 실패하거나 필수 설정이 누락된 경우입니다.
    어떤 Step도 실행되기 전에 보고됩니다.
    """

    def __init__(
        self,
        target: str,
        message: str,
        cause: Exception | None = None,
    ):
        super().__init__(f"구성 오류 [{target}]: {message}", cause)
        self.target = target
        self.details["target"] = target


class GeneratorNotFoundError(DiscoveryEngineError):
    """레지스트리에 등록되지 않은 Generator 요청"""

    def __init__(self, provider: str, service: str):
        super().__init__(f"등록되지 않은 Generator: {provider}/{service}")
        self.provider = provider
        self.service = service
        self.details.update({"provider": provider, "service": service})


class GeneratorStateError(DiscoveryEngineError):
    """Generator 상태 전이 위반 (1회용 Generator 재실행 등)"""

    def __init__(self, generator: str, state: str):
        super().__init__(f"Generator [{generator}]는 {state} 상태에서 실행할 수 없습니다")
        self.generator = generator
        self.state = state
        self.details.update({"generator": generator, "state": state})


class CursorStateError(DiscoveryEngineError):
    """실패했거나 종료된 커서에 대한 advance 호출"""

    pass


# =============================================================================
# 에러 분류
# =============================================================================


class ErrorCategory(Enum):
    """원격 API 에러 카테고리 (로깅/요약용)"""

    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    TIMEOUT = "timeout"
    EXPIRED_TOKEN = "expired_token"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnauthorizedOperation",
}

THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}

NOT_FOUND_CODES = {
    "ResourceNotFoundException",
    "NotFoundException",
    "StackSetNotFoundException",
    "WAFNonexistentItemException",
}


def _status_code(error: Exception) -> int | None:
    """requests.HTTPError 계열에서 HTTP 상태 코드 추출"""
    response = getattr(error, "response", None)
    return getattr(response, "status_code", None)


def get_error_code(error: Exception) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    botocore ClientError는 response의 Error.Code, HTTP 에러는 "HTTP <status>",
    그 외에는 예외 클래스명을 반환합니다.
    """
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        code: str = response.get("Error", {}).get("Code", "Unknown")
        return code

    status = _status_code(error)
    if status is not None:
        return f"HTTP {status}"

    return error.__class__.__name__


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인"""
    return get_error_code(error) in ACCESS_DENIED_CODES or _status_code(error) in (401, 403)


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return get_error_code(error) in THROTTLING_CODES or _status_code(error) == 429


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인"""
    return get_error_code(error) in NOT_FOUND_CODES or _status_code(error) == 404


def categorize_error(error: Exception) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류"""
    if isinstance(error, ConfigurationError):
        return ErrorCategory.CONFIGURATION
    if is_throttling(error):
        return ErrorCategory.THROTTLING
    if is_access_denied(error):
        return ErrorCategory.ACCESS_DENIED
    if is_not_found(error):
        return ErrorCategory.NOT_FOUND

    code = get_error_code(error)
    if "Timeout" in code:
        return ErrorCategory.TIMEOUT
    if code in ("ExpiredToken", "ExpiredTokenException"):
        return ErrorCategory.EXPIRED_TOKEN

    if isinstance(error, TimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (ConnectionError, OSError)):
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅"""
    if isinstance(error, DiscoveryEngineError):
        return str(error)

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        error_info = response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        friendly_messages = {
            "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
            "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        }

        return friendly_messages.get(code, f"{code}: {message}")

    status = _status_code(error)
    if status in (401, 403):
        return "API 키 권한이 없습니다. Octopus Deploy API 키를 확인하세요."

    return str(error)
