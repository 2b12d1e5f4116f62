"""
core/inventory/registry.py - Generator 레지스트리

(provider, service) 키로 Generator 팩토리를 등록하고 생성합니다.
프로바이더 모듈은 임포트 시 ``register`` 데코레이터로 스스로 등록합니다.

Example:
    from core.inventory.registry import default_registry, register

    @register("aws", "cloudformation")
    def cloudformation_generator(client_factory):
        return ResourceGenerator("cloudformation", "aws", [...], client_factory)

    generator = default_registry.create("aws", "cloudformation", client_factory)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from core.exceptions import GeneratorNotFoundError

from .generator import ClientFactory, ResourceGenerator

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[ClientFactory], ResourceGenerator]


class GeneratorRegistry:
    """스레드 세이프 Generator 팩토리 레지스트리"""

    def __init__(self) -> None:
        self._factories: dict[tuple[str, str], GeneratorFactory] = {}
        self._lock = threading.Lock()

    def add(self, provider: str, service: str, factory: GeneratorFactory) -> None:
        """팩토리 등록 (같은 키는 덮어씀)"""
        key = (provider, service)
        with self._lock:
            if key in self._factories:
                logger.debug("Generator 팩토리 교체: %s/%s", provider, service)
            self._factories[key] = factory

    def register(self, provider: str, service: str) -> Callable[[GeneratorFactory], GeneratorFactory]:
        """팩토리 등록 데코레이터"""

        def decorator(factory: GeneratorFactory) -> GeneratorFactory:
            self.add(provider, service, factory)
            return factory

        return decorator

    def create(self, provider: str, service: str, client_factory: ClientFactory) -> ResourceGenerator:
        """새 Generator 인스턴스 생성

        Raises:
            GeneratorNotFoundError: 등록되지 않은 키
        """
        with self._lock:
            factory = self._factories.get((provider, service))
        if factory is None:
            raise GeneratorNotFoundError(provider, service)
        return factory(client_factory)

    def providers(self) -> list[str]:
        """등록된 프로바이더 이름 (정렬)"""
        with self._lock:
            return sorted({provider for provider, _ in self._factories})

    def services(self, provider: str) -> list[str]:
        """프로바이더의 서비스 이름 (정렬)"""
        with self._lock:
            return sorted(service for p, service in self._factories if p == provider)

    def keys(self) -> list[tuple[str, str]]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


default_registry = GeneratorRegistry()
register = default_registry.register
