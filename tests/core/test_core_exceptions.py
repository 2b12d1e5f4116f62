"""
tests/core/test_core_exceptions.py - core/exceptions.py 테스트
"""

from unittest.mock import MagicMock

import requests
from botocore.exceptions import ClientError

from core.exceptions import (
    ConfigurationError,
    CursorStateError,
    DiscoveryEngineError,
    ErrorCategory,
    GeneratorNotFoundError,
    GeneratorStateError,
    categorize_error,
    format_error_for_user,
    get_error_code,
    is_access_denied,
    is_not_found,
    is_throttling,
)


def http_error(status: int) -> requests.HTTPError:
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    return requests.HTTPError(f"{status} Client Error", response=response)


class TestExceptionHierarchy:
    """예외 계층 테스트"""

    def test_all_inherit_base(self):
        for exc in (
            ConfigurationError("aws/cloudformation", "x"),
            GeneratorNotFoundError("aws", "ec2"),
            GeneratorStateError("aws/cloudformation", "completed"),
            CursorStateError("x"),
        ):
            assert isinstance(exc, DiscoveryEngineError)

    def test_str_with_cause(self):
        error = DiscoveryEngineError("실패", cause=ValueError("bad"))
        assert str(error) == "실패: bad"

    def test_to_dict(self):
        error = ConfigurationError("octopusdeploy", "API 키가 없습니다")
        data = error.to_dict()

        assert data["error_type"] == "ConfigurationError"
        assert data["message"] == "구성 오류 [octopusdeploy]: API 키가 없습니다"
        assert data["cause"] is None
        assert data["details"] == {"target": "octopusdeploy"}

    def test_not_found_details(self):
        error = GeneratorNotFoundError("aws", "ec2")
        assert "aws/ec2" in str(error)
        assert error.details == {"provider": "aws", "service": "ec2"}


class TestErrorCode:
    """에러 코드 추출"""

    def test_client_error(self, make_client_error):
        assert get_error_code(make_client_error("ThrottlingException")) == "ThrottlingException"

    def test_http_error(self):
        assert get_error_code(http_error(404)) == "HTTP 404"

    def test_plain_exception(self):
        assert get_error_code(ValueError("x")) == "ValueError"


class TestErrorChecks:
    """에러 판별 함수"""

    def test_access_denied(self, make_client_error):
        assert is_access_denied(make_client_error("AccessDeniedException"))
        assert is_access_denied(http_error(401))
        assert not is_access_denied(make_client_error("Throttling"))

    def test_throttling(self, make_client_error):
        assert is_throttling(make_client_error("Throttling"))
        assert is_throttling(http_error(429))

    def test_not_found(self, make_client_error):
        assert is_not_found(make_client_error("StackSetNotFoundException"))
        assert is_not_found(http_error(404))


class TestCategorizeError:
    """categorize_error 테스트"""

    def test_categories(self, make_client_error):
        cases = [
            (ConfigurationError("aws/x", "y"), ErrorCategory.CONFIGURATION),
            (make_client_error("Throttling"), ErrorCategory.THROTTLING),
            (make_client_error("AccessDenied"), ErrorCategory.ACCESS_DENIED),
            (http_error(403), ErrorCategory.ACCESS_DENIED),
            (make_client_error("WAFNonexistentItemException"), ErrorCategory.NOT_FOUND),
            (make_client_error("RequestTimeout"), ErrorCategory.TIMEOUT),
            (make_client_error("ExpiredToken"), ErrorCategory.EXPIRED_TOKEN),
            (TimeoutError("slow"), ErrorCategory.TIMEOUT),
            (ConnectionError("reset"), ErrorCategory.NETWORK),
            (ValueError("?"), ErrorCategory.UNKNOWN),
        ]
        for error, expected in cases:
            assert categorize_error(error) is expected, error


class TestFormatErrorForUser:
    """format_error_for_user 테스트"""

    def test_friendly_message(self, make_client_error):
        assert "권한이 없습니다" in format_error_for_user(make_client_error("AccessDenied"))

    def test_unknown_code(self, make_client_error):
        message = format_error_for_user(make_client_error("ValidationError", message="bad filter"))
        assert message == "ValidationError: bad filter"

    def test_http_unauthorized(self):
        assert "Octopus Deploy API 키" in format_error_for_user(http_error(401))

    def test_engine_error(self):
        error = GeneratorNotFoundError("aws", "ec2")
        assert format_error_for_user(error) == str(error)
