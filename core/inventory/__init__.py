"""
core/inventory - 리소스 탐색 & 정규화 엔진

원격 플랫폼(AWS, Octopus Deploy 등)의 리소스를 열거하여
프로바이더 중립적인 ResourceDescriptor 목록으로 변환합니다.

구성 (하위 → 상위):
    - types: ResourceDescriptor
    - result: Ok / Err 결과 값
    - cursor: PaginationCursor 및 구현체
    - identifier: composite_id (복합 식별자)
    - step: EnumerationStep (ListStep, ChildListStep)
    - generator: ResourceGenerator (순차 fail-fast 오케스트레이션)
    - registry: (provider, service) 키 기반 Generator 레지스트리
    - collector: InventoryCollector (여러 Generator 실행/병합)

Usage:
    from core.inventory import InventoryCollector, GeneratorSelection
    from providers import load_providers
    from providers.aws import create_client_factory

    load_providers()
    result = InventoryCollector().collect(
        [GeneratorSelection("aws", "cloudformation", create_client_factory("cloudformation"))]
    )
    for descriptor in result.get_descriptors():
        print(descriptor.kind, descriptor.id)
"""

from .collector import GeneratorOutcome, GeneratorSelection, InventoryCollector, InventoryResult
from .cursor import (
    BotoPaginatorCursor,
    Page,
    PaginationCursor,
    SinglePageCursor,
    TokenCursor,
    marker_cursor,
)
from .generator import GeneratorState, ResourceGenerator
from .identifier import DELIMITER, composite_id, split_composite_id
from .registry import GeneratorRegistry, default_registry, register
from .result import Err, Ok, Result
from .step import ChildListStep, EnumerationStep, ListStep, StepContext, field_value
from .types import ResourceDescriptor, new_simple_resource

__all__ = [
    # Types
    "ResourceDescriptor",
    "new_simple_resource",
    # Result
    "Ok",
    "Err",
    "Result",
    # Cursor
    "Page",
    "PaginationCursor",
    "TokenCursor",
    "SinglePageCursor",
    "BotoPaginatorCursor",
    "marker_cursor",
    # Identifier
    "DELIMITER",
    "composite_id",
    "split_composite_id",
    # Step
    "StepContext",
    "EnumerationStep",
    "ListStep",
    "ChildListStep",
    "field_value",
    # Generator
    "GeneratorState",
    "ResourceGenerator",
    # Registry
    "GeneratorRegistry",
    "default_registry",
    "register",
    # Collector
    "GeneratorSelection",
    "GeneratorOutcome",
    "InventoryResult",
    "InventoryCollector",
]
