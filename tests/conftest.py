"""
tests/conftest.py - pytest 공통 픽스처

가짜 AWS 클라이언트와 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(make_client_error, fake_cfn_client):
        client = fake_cfn_client(stacks=[[{"StackName": "a", "StackStatus": "CREATE_COMPLETE"}]])
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


# =============================================================================
# 헬퍼
# =============================================================================


def client_error(code: str = "AccessDenied", operation: str = "ListStacks", message: str = "denied") -> ClientError:
    """botocore ClientError 생성"""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def make_client_error():
    """ClientError 팩토리 픽스처"""
    return client_error


def with_tokens(pages: list[list[dict]], result_key: str, token_key: str = "NextToken") -> list[dict]:
    """항목 페이지 목록을 토큰이 연결된 API 응답 목록으로 변환"""
    responses = []
    for index, items in enumerate(pages):
        response = {result_key: items}
        if index < len(pages) - 1:
            response[token_key] = f"token-{index + 1}"
        responses.append(response)
    return responses


@pytest.fixture
def fake_cfn_client():
    """CloudFormation 클라이언트 모킹

    paginator 이름별 응답 페이지를 지정합니다.
    list_stack_instances는 StackSetName별 페이지 목록을 받습니다.
    """

    def build(
        stacks: list[list[dict]] | None = None,
        stack_sets: list[list[dict]] | None = None,
        instances: dict[str, list[list[dict]]] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> MagicMock:
        client = MagicMock()
        errors = errors or {}

        def get_paginator(operation):
            paginator = MagicMock()

            def paginate(**params):
                if operation in errors:
                    raise errors[operation]
                if operation == "list_stacks":
                    return iter(with_tokens(stacks or [[]], "StackSummaries"))
                if operation == "list_stack_sets":
                    return iter(with_tokens(stack_sets or [[]], "Summaries"))
                if operation == "list_stack_instances":
                    pages = (instances or {}).get(params["StackSetName"], [[]])
                    return iter(with_tokens(pages, "Summaries"))
                raise AssertionError(f"unexpected paginator: {operation}")

            paginator.paginate.side_effect = paginate
            return paginator

        client.get_paginator.side_effect = get_paginator
        return client

    return build
