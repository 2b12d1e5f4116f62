"""
core/inventory/step.py - 열거 단계 (Enumeration Step)

하나의 리소스 kind에 대한 "전체 목록 조회"를 담당합니다.
커서를 끝까지 소비하면서 원시 객체를 ResourceDescriptor로 정규화하고,
모두 성공하면 Ok(descriptors), 목록/페이지 요청이 하나라도 실패하면
원본 예외를 담은 Err를 반환합니다 (부분 결과 없음).

주요 구성 요소:
- StepContext: Generator 1회 실행 동안 Step들이 공유하는 클라이언트와 원시 객체 기록
- EnumerationStep: Step 추상 클래스
- ListStep: 단일 목록 호출 기반 Step
- ChildListStep: 앞선 Step의 원시 객체(부모)마다 하위 목록을 조회하는 Step
- field_value: 원시 객체에서 문자열 필드를 꺼내는 헬퍼

Example:
    stacks = ListStep(
        kind="aws_cloudformation_stack",
        provider_name="aws",
        cursor=lambda cfn: BotoPaginatorCursor(cfn, "list_stacks", "StackSummaries"),
        id_of=field_value("StackName"),
        skip=lambda s: s.get("StackStatus") == "DELETE_COMPLETE",
        allow_empty_attributes=["tags."],
    )
    result = stacks.run(StepContext(client=cfn))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .cursor import PaginationCursor
from .result import Err, Ok, Result
from .types import ResourceDescriptor, new_simple_resource

logger = logging.getLogger(__name__)

CursorFactory = Callable[[Any], PaginationCursor]
ChildCursorFactory = Callable[[Any, Any], PaginationCursor]
ItemFunc = Callable[[Any], str]
SkipFunc = Callable[[Any], bool]


def field_value(key: str) -> ItemFunc:
    """원시 객체(dict)의 key 값을 문자열로 반환하는 함수 생성 (없으면 "")"""

    def getter(item: Any) -> str:
        value = item.get(key)
        return "" if value is None else str(value)

    return getter


@dataclass
class StepContext:
    """Generator 1회 실행 범위의 Step 공유 상태

    Attributes:
        client: 인증이 끝난 서비스 클라이언트 (읽기 전용으로 사용)
        raw_objects: 성공한 Step이 남긴 kind별 원시 객체 (후속 Step의 부모 목록)
    """

    client: Any
    raw_objects: dict[str, list[Any]] = field(default_factory=dict)

    def record(self, kind: str, items: list[Any]) -> None:
        self.raw_objects[kind] = items

    def parents(self, kind: str) -> list[Any]:
        return self.raw_objects.get(kind, [])


class EnumerationStep(ABC):
    """열거 단계 추상 클래스

    kind, provider_name, allow_empty_attributes는 Step 생성 시 고정되며
    원격 데이터에서 유도하지 않습니다.
    """

    def __init__(
        self,
        kind: str,
        provider_name: str,
        id_of: ItemFunc,
        name_of: ItemFunc | None = None,
        skip: SkipFunc | None = None,
        allow_empty_attributes: Iterable[str] = (),
    ):
        self.kind = kind
        self.provider_name = provider_name
        self.allow_empty_attributes = frozenset(allow_empty_attributes)
        self._id_of = id_of
        self._name_of = name_of
        self._skip = skip

    @abstractmethod
    def run(self, context: StepContext) -> Result[list[ResourceDescriptor]]:
        """Step 실행

        Returns:
            Ok(API 반환 순서의 ResourceDescriptor 목록) 또는 Err(원본 예외)
        """

    def _normalize(self, item: Any) -> ResourceDescriptor | None:
        """원시 객체 하나를 ResourceDescriptor로 변환 (skip 대상이면 None)"""
        if self._skip is not None and self._skip(item):
            return None

        resource_id = self._id_of(item)
        name = self._name_of(item) if self._name_of is not None else ""
        return new_simple_resource(
            resource_id,
            name,
            self.kind,
            self.provider_name,
            self.allow_empty_attributes,
        )

    def _drain(
        self,
        cursor: PaginationCursor,
        descriptors: list[ResourceDescriptor],
        raw: list[Any],
    ) -> Exception | None:
        """커서를 끝까지 소비하며 descriptors/raw에 추가. 실패 시 예외 반환"""
        skipped = 0
        for items in cursor.pages():
            for item in items:
                descriptor = self._normalize(item)
                if descriptor is None:
                    skipped += 1
                    continue
                descriptors.append(descriptor)
                raw.append(item)

        if skipped:
            logger.debug("[%s] 필터로 제외된 항목 %d개", self.kind, skipped)
        return cursor.failure()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, provider={self.provider_name!r})"


class ListStep(EnumerationStep):
    """단일 목록 호출(페이지네이션 포함) 기반 Step"""

    def __init__(self, kind: str, provider_name: str, cursor: CursorFactory, id_of: ItemFunc, **options: Any):
        super().__init__(kind, provider_name, id_of, **options)
        self._cursor_factory = cursor

    def run(self, context: StepContext) -> Result[list[ResourceDescriptor]]:
        logger.debug("[%s] 목록 조회 시작", self.kind)
        descriptors: list[ResourceDescriptor] = []
        raw: list[Any] = []

        try:
            cursor = self._cursor_factory(context.client)
        except Exception as e:
            return Err(e)

        error = self._drain(cursor, descriptors, raw)
        if error is not None:
            logger.debug("[%s] 목록 조회 실패 (%d페이지 처리 후): %s", self.kind, cursor.pages_fetched, error)
            return Err(error)

        context.record(self.kind, raw)
        logger.debug("[%s] %d개 수집 (%d페이지)", self.kind, len(descriptors), cursor.pages_fetched)
        return Ok(descriptors)


class ChildListStep(EnumerationStep):
    """부모 객체별 하위 목록 조회 Step

    같은 Generator에서 먼저 실행된 ``parent_kind`` Step의 원시 객체를 부모로 사용하며,
    부모마다 ``cursor(client, parent)``로 만든 커서를 순서대로 소비합니다.
    하위 kind의 Descriptor만 반환합니다.
    """

    def __init__(
        self,
        kind: str,
        provider_name: str,
        parent_kind: str,
        cursor: ChildCursorFactory,
        id_of: ItemFunc,
        **options: Any,
    ):
        super().__init__(kind, provider_name, id_of, **options)
        self.parent_kind = parent_kind
        self._cursor_factory = cursor

    def run(self, context: StepContext) -> Result[list[ResourceDescriptor]]:
        parents = context.parents(self.parent_kind)
        logger.debug("[%s] 부모 %d개(%s) 하위 목록 조회 시작", self.kind, len(parents), self.parent_kind)
        descriptors: list[ResourceDescriptor] = []
        raw: list[Any] = []

        for parent in parents:
            try:
                cursor = self._cursor_factory(context.client, parent)
            except Exception as e:
                return Err(e)

            error = self._drain(cursor, descriptors, raw)
            if error is not None:
                logger.debug("[%s] 하위 목록 조회 실패: %s", self.kind, error)
                return Err(error)

        context.record(self.kind, raw)
        logger.debug("[%s] %d개 수집", self.kind, len(descriptors))
        return Ok(descriptors)
