"""
providers - 프로바이더별 Generator 패키지

각 프로바이더 패키지는 임포트 시 ``core.inventory.register``로 Generator 팩토리를
레지스트리에 등록하고, ``create_client_factory(service, **options)``를 제공합니다.

구조:
    providers/
    ├── aws/            # boto3 (cloudformation, wafregional)
    └── octopusdeploy/  # requests (environments, tag_sets)

Usage:
    from providers import load_providers, client_factory_for

    load_providers()
    factory = client_factory_for("aws", "cloudformation", region="us-east-1")
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)

PROVIDER_PACKAGES: dict[str, str] = {
    "aws": "providers.aws",
    "octopusdeploy": "providers.octopusdeploy",
}


def load_provider(provider: str) -> ModuleType:
    """프로바이더 패키지 임포트 (Generator 자동 등록)

    Raises:
        KeyError: 알 수 없는 프로바이더
    """
    module_path = PROVIDER_PACKAGES[provider]
    return importlib.import_module(module_path)


def load_providers() -> list[str]:
    """모든 프로바이더 패키지를 임포트하고 이름 목록 반환"""
    for provider in PROVIDER_PACKAGES:
        load_provider(provider)
        logger.debug("프로바이더 로드: %s", provider)
    return list(PROVIDER_PACKAGES)


def client_factory_for(provider: str, service: str, **options: Any) -> Callable[[], Any]:
    """프로바이더 패키지의 create_client_factory 호출

    Args:
        provider: 프로바이더 이름
        service: registry service 이름
        **options: 프로바이더별 옵션 (aws: profile/region, octopusdeploy: server/api_key/space)
    """
    module = load_provider(provider)
    return module.create_client_factory(service, **options)
