"""
core/inventory/generator.py - 리소스 Generator

하나의 provider/service에 대해 정해진 순서의 Enumeration Step들을 실행하고
결과를 하나의 Descriptor 목록으로 누적합니다.

상태 전이:
    NOT_STARTED → RUNNING → COMPLETED   (모든 Step 성공)
                          → FAILED      (첫 Step 실패, 이후 Step 미실행)

정책:
    - 순차, fail-fast, 재개 불가
    - FAILED이면 앞서 성공한 Step의 결과도 반환하지 않음 (all-or-nothing)
    - Step 오류는 래핑 없이 그대로 Err로 전달
    - 클라이언트 생성 실패는 Step 실행 전 ConfigurationError로 보고
    - 1회용: 다시 탐색하려면 레지스트리에서 새 Generator를 생성

Example:
    generator = ResourceGenerator(
        name="cloudformation",
        provider_name="aws",
        steps=[stacks_step, stack_sets_step, instances_step],
        client_factory=lambda: cfn_client,
    )
    result = generator.discover()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from core.exceptions import ConfigurationError, GeneratorStateError

from .result import Err, Ok, Result
from .step import ChildListStep, EnumerationStep, StepContext
from .types import ResourceDescriptor

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Any]


class GeneratorState(Enum):
    """Generator 실행 상태"""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class ResourceGenerator:
    """Enumeration Step 오케스트레이터

    Attributes:
        name: 서비스 이름 (레지스트리 키의 service 부분)
        provider_name: 프로바이더 이름
        steps: 실행 순서대로의 Step 목록
        unsupported_kinds: 플랫폼에 목록 API가 없어 수집하지 못하는 kind
        state: 현재 상태
    """

    def __init__(
        self,
        name: str,
        provider_name: str,
        steps: Sequence[EnumerationStep],
        client_factory: ClientFactory,
        unsupported_kinds: Iterable[str] = (),
    ):
        self.name = name
        self.provider_name = provider_name
        self.steps = list(steps)
        self.unsupported_kinds = tuple(unsupported_kinds)
        self.state = GeneratorState.NOT_STARTED
        self._client_factory = client_factory

        self._validate_steps()

    @property
    def key(self) -> str:
        return f"{self.provider_name}/{self.name}"

    @property
    def kinds(self) -> list[str]:
        """이 Generator가 수집하는 kind 목록 (실행 순서)"""
        return [step.kind for step in self.steps]

    def _validate_steps(self) -> None:
        """ChildListStep의 부모 kind가 앞선 Step에 있는지 확인"""
        seen: set[str] = set()
        for step in self.steps:
            if isinstance(step, ChildListStep) and step.parent_kind not in seen:
                raise ValueError(f"[{self.key}] {step.kind}의 부모 kind '{step.parent_kind}'를 수집하는 Step이 앞에 없습니다")
            seen.add(step.kind)

    def discover(self) -> Result[list[ResourceDescriptor]]:
        """모든 Step을 순서대로 실행

        Returns:
            COMPLETED: Ok(전체 Descriptor 목록)
            FAILED: Err(첫 번째 오류), Descriptor 없음

        Raises:
            GeneratorStateError: NOT_STARTED가 아닌 상태에서 호출
        """
        if self.state is not GeneratorState.NOT_STARTED:
            raise GeneratorStateError(self.key, self.state.value)

        self.state = GeneratorState.RUNNING
        logger.info(f"[{self.key}] 탐색 시작: {len(self.steps)}개 Step")

        try:
            client = self._create_client()
        except ConfigurationError as e:
            return self._fail(e)

        for kind in self.unsupported_kinds:
            logger.debug("[%s] 목록 API 없음, 건너뜀: %s", self.key, kind)

        context = StepContext(client=client)
        descriptors: list[ResourceDescriptor] = []

        try:
            for step in self.steps:
                result = step.run(context)
                if isinstance(result, Err):
                    logger.warning(f"[{self.key}] {step.kind} 수집 실패, 남은 Step 중단: {result.error}")
                    return self._fail(result.error)
                descriptors.extend(result.value)
        except Exception:
            self.state = GeneratorState.FAILED
            raise

        self.state = GeneratorState.COMPLETED
        logger.info(f"[{self.key}] 탐색 완료: {len(descriptors)}개 리소스")
        return Ok(descriptors)

    def _create_client(self) -> Any:
        try:
            client = self._client_factory()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(self.key, "클라이언트 생성 실패", cause=e) from e

        if client is None:
            raise ConfigurationError(self.key, "클라이언트가 없습니다")
        return client

    def _fail(self, error: Exception) -> Err:
        self.state = GeneratorState.FAILED
        return Err(error)

    def __repr__(self) -> str:
        return f"ResourceGenerator({self.key!r}, steps={len(self.steps)}, state={self.state.value})"
