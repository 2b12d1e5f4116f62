"""
core/inventory/collector.py - Inventory Collector

선택된 Generator들을 실행하고 결과를 병합합니다.
실패한 Generator가 있어도 나머지는 계속 실행하며, 실패 여부는
InventoryResult로 호출자에게 넘깁니다.

기본은 순차 실행이며 ``max_workers > 1``이면 서로 독립적인 Generator를
ThreadPoolExecutor로 병렬 실행합니다. 각 Generator의 결과 목록은 해당
실행만 소유하고, 완료(또는 실패) 후에만 병합됩니다.

Example:
    collector = InventoryCollector()
    result = collector.collect(
        [
            GeneratorSelection("aws", "cloudformation", cfn_factory),
            GeneratorSelection("aws", "wafregional", waf_factory),
        ],
        max_workers=2,
    )
    descriptors = result.get_descriptors()
    if result.error_count:
        print(result.get_error_summary())
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from core.exceptions import ErrorCategory, categorize_error, format_error_for_user

from .generator import ClientFactory, ResourceGenerator
from .registry import GeneratorRegistry, default_registry
from .result import Err, Ok, Result
from .types import ResourceDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSelection:
    """실행할 Generator 선택

    Attributes:
        provider: 프로바이더 이름 (예: "aws")
        service: 서비스 이름 (예: "cloudformation")
        client_factory: 인증된 클라이언트를 반환하는 함수
    """

    provider: str
    service: str
    client_factory: ClientFactory

    @property
    def key(self) -> str:
        return f"{self.provider}/{self.service}"


@dataclass
class GeneratorOutcome:
    """Generator 1회 실행 결과"""

    provider: str
    service: str
    result: Result[list[ResourceDescriptor]]
    duration_ms: float = 0.0

    @property
    def key(self) -> str:
        return f"{self.provider}/{self.service}"

    @property
    def success(self) -> bool:
        return isinstance(self.result, Ok)

    @property
    def descriptors(self) -> list[ResourceDescriptor]:
        return self.result.unwrap_or([])

    @property
    def error(self) -> Exception | None:
        return self.result.error if isinstance(self.result, Err) else None

    def __str__(self) -> str:
        status = "OK" if self.success else "FAIL"
        return f"[{self.key}] {status} ({self.duration_ms:.0f}ms)"


@dataclass
class InventoryResult:
    """전체 수집 결과"""

    outcomes: list[GeneratorOutcome] = field(default_factory=list)

    @property
    def successful(self) -> list[GeneratorOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[GeneratorOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    @property
    def total_duration_ms(self) -> float:
        return sum(o.duration_ms for o in self.outcomes)

    def get_descriptors(self) -> list[ResourceDescriptor]:
        """성공한 Generator의 Descriptor를 선택 순서대로 평탄화"""
        descriptors: list[ResourceDescriptor] = []
        for outcome in self.successful:
            descriptors.extend(outcome.descriptors)
        return descriptors

    def get_errors(self) -> list[Exception]:
        return [o.error for o in self.failed if o.error is not None]

    def get_errors_by_category(self) -> dict[ErrorCategory, list[GeneratorOutcome]]:
        """에러 카테고리별 실패 결과 그룹핑"""
        grouped: dict[ErrorCategory, list[GeneratorOutcome]] = {}
        for outcome in self.failed:
            if outcome.error is None:
                continue
            grouped.setdefault(categorize_error(outcome.error), []).append(outcome)
        return grouped

    def get_error_summary(self) -> str:
        """실패 요약 문자열"""
        if not self.failed:
            return ""

        lines = [f"총 {self.error_count}개 Generator 실패:"]
        for category, outcomes in self.get_errors_by_category().items():
            lines.append(f"  [{category.value}] {len(outcomes)}건")
            for outcome in outcomes:
                lines.append(f"    - {outcome.key}: {format_error_for_user(outcome.error)}")
        return "\n".join(lines)


class InventoryCollector:
    """Generator 실행 및 결과 병합

    Args:
        registry: Generator 레지스트리 (기본: default_registry)
    """

    def __init__(self, registry: GeneratorRegistry | None = None):
        self._registry = registry or default_registry

    def collect(self, selections: Sequence[GeneratorSelection], max_workers: int = 1) -> InventoryResult:
        """선택된 Generator 실행

        Generator 생성(레지스트리 조회)은 실행 전에 모두 끝내므로,
        등록되지 않은 키가 있으면 아무것도 실행하지 않고 GeneratorNotFoundError가 발생합니다.

        Args:
            selections: 실행할 Generator 목록
            max_workers: 1이면 순차 실행, 그 이상이면 병렬 실행

        Returns:
            선택 순서와 같은 순서의 GeneratorOutcome을 담은 InventoryResult
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        generators = [self._registry.create(s.provider, s.service, s.client_factory) for s in selections]
        if not generators:
            logger.warning("실행할 Generator가 없습니다")
            return InventoryResult()

        logger.info(f"인벤토리 수집 시작: {len(generators)}개 Generator, max_workers={max_workers}")

        if max_workers == 1 or len(generators) == 1:
            outcomes = [self._run(g) for g in generators]
        else:
            outcomes = self._run_parallel(generators, max_workers)

        result = InventoryResult(outcomes=outcomes)
        logger.info(f"인벤토리 수집 완료: 성공 {result.success_count}, 실패 {result.error_count}")
        return result

    def _run_parallel(self, generators: list[ResourceGenerator], max_workers: int) -> list[GeneratorOutcome]:
        slots: list[GeneratorOutcome | None] = [None] * len(generators)

        with ThreadPoolExecutor(max_workers=min(max_workers, len(generators))) as executor:
            futures = {executor.submit(self._run, g): index for index, g in enumerate(generators)}
            for future in as_completed(futures):
                slots[futures[future]] = future.result()

        return [outcome for outcome in slots if outcome is not None]

    @staticmethod
    def _run(generator: ResourceGenerator) -> GeneratorOutcome:
        start = time.monotonic()
        try:
            result = generator.discover()
        except Exception as e:
            logger.exception(f"[{generator.key}] 예기치 않은 오류")
            result = Err(e)

        duration_ms = (time.monotonic() - start) * 1000
        outcome = GeneratorOutcome(generator.provider_name, generator.name, result, duration_ms)
        logger.debug(str(outcome))
        return outcome
