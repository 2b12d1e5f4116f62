"""
providers/aws/client.py - boto3 client 생성 헬퍼

Retry(adaptive 모드) + 타임아웃이 설정된 boto3 client를 생성합니다.
재시도/백오프는 botocore가 담당하며, 탐색 엔진은 클라이언트가 돌려준
오류를 재시도 없이 그대로 전달합니다.

주요 구성 요소:
- get_client: retry 설정이 적용된 boto3 client 생성
- create_client_factory: Generator에 넘길 지연 client 팩토리

Example:
    from providers.aws.client import create_client_factory

    factory = create_client_factory("cloudformation", profile="dev", region="us-east-1")
    cfn = factory()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal, cast

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from core.config import get_default_profile, get_default_region, settings
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_RETRY_MODE: RetryMode = "adaptive"


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = settings.API_CONNECT_TIMEOUT,
    read_timeout: int = settings.API_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Retry가 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (cloudformation, waf-regional 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        config = config.merge(kwargs.pop("config"))

    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )


def create_client_factory(
    service_name: str,
    profile: str | None = None,
    region: str | None = None,
    session: boto3.Session | None = None,
) -> Callable[[], Any]:
    """Generator용 지연 client 팩토리

    세션 생성은 Generator가 discover()를 시작할 때 이루어지며,
    프로파일이 없거나 자격 증명 구성이 잘못된 경우 ConfigurationError가 됩니다.

    Args:
        service_name: AWS 서비스 이름
        profile: AWS 프로파일 (None이면 환경변수 기본값)
        region: 리전 (None이면 환경변수 / settings 기본값)
        session: 이미 만들어진 boto3 Session (지정 시 profile 무시)
    """
    region_name = region or get_default_region()

    def factory() -> Any:
        try:
            active = session or boto3.Session(profile_name=profile or get_default_profile())
            return get_client(active, service_name, region_name=region_name)
        except BotoCoreError as e:
            raise ConfigurationError(f"aws/{service_name}", f"boto3 세션 생성 실패 ({region_name})", cause=e) from e

    return factory
