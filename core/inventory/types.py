"""
core/inventory/types.py - 리소스 디스크립터

프로바이더 중립 인벤토리의 정규화 단위인 ResourceDescriptor를 정의합니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceDescriptor:
    """정규화된 리소스 정보

    탐색 1회 동안 관찰된 원격 객체 하나당 정확히 한 번 생성되며 이후 변경되지 않습니다.

    Attributes:
        id: 원격 객체의 고유 키 (네이티브 ID 또는 복합 ID). (provider, kind) 범위에서 유일
        name: 표시 이름 (별도 표시 필드가 없으면 id와 동일)
        kind: 리소스 타입 태그 (예: "aws_cloudformation_stack"). Step별 고정값
        provider_name: 리소스를 생성한 플랫폼 (예: "aws", "octopusdeploy")
        allow_empty_attributes: 값이 비어 있어도 다운스트림 생성에서 유지해야 하는 속성 접두사
    """

    id: str
    name: str
    kind: str
    provider_name: str
    allow_empty_attributes: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (JSON 출력용)"""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind,
            "provider_name": self.provider_name,
            "allow_empty_attributes": sorted(self.allow_empty_attributes),
        }


def new_simple_resource(
    resource_id: str,
    name: str,
    kind: str,
    provider_name: str,
    allow_empty_attributes: Iterable[str] = (),
) -> ResourceDescriptor:
    """ResourceDescriptor 생성 헬퍼

    name이 비어 있으면 id를 이름으로 사용합니다.
    """
    return ResourceDescriptor(
        id=resource_id,
        name=name or resource_id,
        kind=kind,
        provider_name=provider_name,
        allow_empty_attributes=frozenset(allow_empty_attributes),
    )
