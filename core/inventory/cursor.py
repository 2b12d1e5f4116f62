"""
core/inventory/cursor.py - 페이지네이션 커서

여러 페이지로 나뉜 목록 응답을 앞으로만, 순차적으로 순회하는 커서입니다.

주요 구성 요소:
- Page: 한 번의 advance() 결과 (항목 + 다음 페이지 존재 여부)
- PaginationCursor: 커서 추상 클래스 (advance / current_page / failure / pages)
- TokenCursor: fetch(token) -> (items, next_token) 함수를 감싸는 범용 커서
- BotoPaginatorCursor: boto3 paginator를 한 페이지씩 소비하는 커서
- SinglePageCursor: 페이지네이션이 없는 단일 목록 호출
- marker_cursor: NextMarker 방식 API용 TokenCursor 생성 헬퍼 (WAF Regional)

규칙:
- 페이지를 건너뛰거나 다시 요청하지 않습니다.
- 빈 페이지도 유효하며, API가 다음 토큰을 주지 않을 때만 종료됩니다.
- 첫 오류에서 즉시 중단하고 failure()로 노출합니다. 이후 advance()는 CursorStateError.

Example:
    cursor = BotoPaginatorCursor(cfn, "list_stacks", "StackSummaries")
    for items in cursor.pages():
        for summary in items:
            ...
    if cursor.failure() is not None:
        return Err(cursor.failure())
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from core.exceptions import CursorStateError

logger = logging.getLogger(__name__)

# fetch(token) -> (items, next_token)
FetchFunc = Callable[[Any], tuple[list[Any], Any]]


@dataclass(frozen=True)
class Page:
    """advance() 한 번의 결과

    Attributes:
        items: 이번 페이지의 원시 항목
        has_next: 이후 페이지 존재 여부
    """

    items: list[Any] = field(default_factory=list)
    has_next: bool = False


class PaginationCursor(ABC):
    """페이지네이션 커서 추상 클래스

    하위 클래스는 ``_fetch(token)``만 구현합니다. 토큰 관리, 종료 판정,
    실패 기록은 이 클래스가 담당합니다.
    """

    def __init__(self) -> None:
        self._token: Any = None
        self._page: list[Any] = []
        self._has_next = True
        self._failure: Exception | None = None
        self.pages_fetched = 0

    @abstractmethod
    def _fetch(self, token: Any) -> tuple[list[Any], Any]:
        """token 위치의 페이지를 요청

        Args:
            token: 직전 페이지가 돌려준 토큰 (첫 호출은 None)

        Returns:
            (항목 목록, 다음 토큰 또는 None)
        """

    @property
    def done(self) -> bool:
        """더 이상 advance()할 수 없는 상태인지"""
        return self._failure is not None or not self._has_next

    def advance(self) -> Page:
        """다음 페이지 요청

        Returns:
            Page. 요청이 실패하면 빈 종료 페이지를 반환하고 failure()에 예외를 기록합니다.

        Raises:
            CursorStateError: 이미 실패했거나 마지막 페이지까지 소비한 커서
        """
        if self._failure is not None:
            raise CursorStateError("이미 실패한 커서는 advance할 수 없습니다", cause=self._failure)
        if not self._has_next:
            raise CursorStateError("마지막 페이지 이후에는 advance할 수 없습니다")

        try:
            items, next_token = self._fetch(self._token)
        except Exception as e:
            self._failure = e
            self._has_next = False
            logger.debug("페이지 요청 실패 (page=%d): %s", self.pages_fetched + 1, e)
            return Page()

        self._page = list(items or [])
        self._token = next_token
        self._has_next = bool(next_token)
        self.pages_fetched += 1
        return Page(items=list(self._page), has_next=self._has_next)

    def current_page(self) -> list[Any]:
        """가장 최근에 받은 페이지 항목 (복사본)"""
        return list(self._page)

    def failure(self) -> Exception | None:
        """첫 번째 오류 (없으면 None)"""
        return self._failure

    def pages(self) -> Iterator[list[Any]]:
        """종료 또는 실패 전까지 페이지 항목을 순서대로 yield

        실패 시 조용히 멈추므로 호출자는 순회 후 failure()를 확인해야 합니다.
        """
        while not self.done:
            page = self.advance()
            if self._failure is not None:
                return
            yield page.items


class TokenCursor(PaginationCursor):
    """fetch 함수 기반 범용 커서"""

    def __init__(self, fetch: FetchFunc):
        super().__init__()
        self._fetch_func = fetch

    def _fetch(self, token: Any) -> tuple[list[Any], Any]:
        return self._fetch_func(token)


class SinglePageCursor(PaginationCursor):
    """페이지네이션이 없는 목록 호출을 한 페이지짜리 커서로 감쌉니다."""

    def __init__(self, call: Callable[..., dict[str, Any]], result_key: str, **params: Any):
        super().__init__()
        self._call = call
        self._result_key = result_key
        self._params = params

    def _fetch(self, token: Any) -> tuple[list[Any], Any]:
        response = self._call(**self._params)
        return response.get(self._result_key, []), None


class BotoPaginatorCursor(PaginationCursor):
    """boto3 paginator 커서

    ``client.get_paginator(operation).paginate(**params)``를 지연 생성하고
    advance()마다 한 페이지씩 소비합니다. 토큰은 botocore가 관리하며,
    응답의 ``token_key`` 유무로 다음 페이지 존재 여부를 판단합니다.
    """

    def __init__(
        self,
        client: Any,
        operation: str,
        result_key: str,
        token_key: str = "NextToken",
        **params: Any,
    ):
        super().__init__()
        self._client = client
        self._operation = operation
        self._result_key = result_key
        self._token_key = token_key
        self._params = params
        self._iterator: Iterator[dict[str, Any]] | None = None

    def _fetch(self, token: Any) -> tuple[list[Any], Any]:
        if self._iterator is None:
            paginator = self._client.get_paginator(self._operation)
            self._iterator = iter(paginator.paginate(**self._params))

        response = next(self._iterator, None)
        if response is None:
            return [], None
        return response.get(self._result_key, []), response.get(self._token_key)


def marker_cursor(
    call: Callable[..., dict[str, Any]],
    result_key: str,
    limit: int,
    marker_key: str = "NextMarker",
    **params: Any,
) -> TokenCursor:
    """NextMarker 방식 List API용 커서

    botocore paginator가 정의되지 않은 서비스(WAF Regional 등)에서 사용합니다.

    Args:
        call: boto3 client 메서드 (예: client.list_web_acls)
        result_key: 응답에서 항목 목록 키 (예: "WebACLs")
        limit: 요청당 최대 항목 수
        marker_key: 요청/응답 토큰 키
        **params: 추가 요청 파라미터
    """

    def fetch(token: Any) -> tuple[list[Any], Any]:
        kwargs = dict(params, Limit=limit)
        if token:
            kwargs[marker_key] = token
        response = call(**kwargs)
        return response.get(result_key, []), response.get(marker_key)

    return TokenCursor(fetch)
