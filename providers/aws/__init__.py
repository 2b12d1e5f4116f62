"""
providers/aws - AWS 리소스 Generator

서비스:
    - cloudformation: Stack, StackSet, StackSet Instance
    - wafregional: WAF Regional (Classic) Web ACL, Rule, 각종 Match Set 등 12종

클라이언트는 boto3 + botocore(adaptive retry)로 생성합니다.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

PROVIDER_NAME = "aws"

# registry service 이름 → boto3 서비스 이름
BOTO3_SERVICE_NAMES = {
    "cloudformation": "cloudformation",
    "wafregional": "waf-regional",
}

from .client import get_client  # noqa: E402
from .client import create_client_factory as _create_boto3_client_factory  # noqa: E402
from . import cloudformation, waf_regional  # noqa: E402


def create_client_factory(
    service: str,
    profile: str | None = None,
    region: str | None = None,
    **kwargs: Any,
) -> Callable[[], Any]:
    """registry service 이름으로 boto3 client 팩토리 생성

    Args:
        service: registry service 이름 ("cloudformation", "wafregional")
        profile: AWS 프로파일
        region: 리전
    """
    return _create_boto3_client_factory(BOTO3_SERVICE_NAMES.get(service, service), profile=profile, region=region)


__all__ = [
    "PROVIDER_NAME",
    "BOTO3_SERVICE_NAMES",
    "cloudformation",
    "waf_regional",
    "create_client_factory",
    "get_client",
]
