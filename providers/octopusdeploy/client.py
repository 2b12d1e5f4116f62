"""
providers/octopusdeploy/client.py - Octopus Deploy REST 클라이언트

requests.Session 위에 API 키 헤더를 얹은 얇은 클라이언트입니다.
컬렉션 엔드포인트(``/api/{space}/environments`` 등)는 ``Items``와
``Links["Page.Next"]``로 페이지를 넘깁니다.

Example:
    client = OctopusDeployClient("https://octopus.example.com", api_key, space_id="Spaces-1")
    cursor = client.cursor("environments")
    for items in cursor.pages():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import urljoin

import requests

from core.config import get_octopus_api_key, get_octopus_server, get_octopus_space, settings
from core.exceptions import ConfigurationError
from core.inventory import TokenCursor

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Octopus-ApiKey"


class OctopusDeployClient:
    """Octopus Deploy 컬렉션 조회 클라이언트

    Args:
        server: Octopus 서버 URL (예: "https://octopus.example.com")
        api_key: API 키
        space_id: Space ID (None이면 기본 Space의 레거시 경로 사용)
        session: 재사용할 requests.Session
        page_size: 페이지당 항목 수 (take)
        timeout: 요청 타임아웃 (초)
    """

    def __init__(
        self,
        server: str,
        api_key: str,
        space_id: str | None = None,
        session: requests.Session | None = None,
        page_size: int = settings.OCTOPUS_PAGE_SIZE,
        timeout: int = settings.API_TIMEOUT,
    ):
        self.server = server.rstrip("/")
        self.space_id = space_id
        self.page_size = page_size
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({API_KEY_HEADER: api_key, "Accept": "application/json"})

    def collection_url(self, collection: str) -> str:
        if self.space_id:
            return f"{self.server}/api/{self.space_id}/{collection}"
        return f"{self.server}/api/{collection}"

    def list_page(self, collection: str, link: str | None = None) -> tuple[list[dict[str, Any]], str | None]:
        """컬렉션 한 페이지 조회

        Args:
            collection: 컬렉션 이름 (예: "environments", "tagsets")
            link: 직전 페이지의 ``Page.Next`` 링크 (첫 페이지는 None)

        Returns:
            (항목 목록, 다음 페이지 링크 또는 None)

        Raises:
            requests.HTTPError: 4xx/5xx 응답
            requests.RequestException: 연결/타임아웃 오류
        """
        if link:
            url = urljoin(f"{self.server}/", link)
            params = None
        else:
            url = self.collection_url(collection)
            params = {"skip": 0, "take": self.page_size}

        logger.debug("GET %s", url)
        response = self._session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        body = response.json()
        return body.get("Items", []), body.get("Links", {}).get("Page.Next")

    def cursor(self, collection: str) -> TokenCursor:
        """컬렉션 전체를 순회하는 커서"""
        return TokenCursor(lambda link: self.list_page(collection, link))


def create_client_factory(
    service: str = "",
    server: str | None = None,
    api_key: str | None = None,
    space: str | None = None,
    session: requests.Session | None = None,
    **kwargs: Any,
) -> Callable[[], OctopusDeployClient]:
    """Generator용 지연 클라이언트 팩토리

    인자가 없으면 OCTOPUS_URL / OCTOPUS_API_KEY / OCTOPUS_SPACE 환경변수를 사용합니다.
    서버나 API 키가 없으면 팩토리 호출 시 ConfigurationError가 발생합니다.
    """

    def factory() -> OctopusDeployClient:
        resolved_server = server or get_octopus_server()
        resolved_key = api_key or get_octopus_api_key()
        if not resolved_server:
            raise ConfigurationError("octopusdeploy", "서버 URL이 없습니다 (OCTOPUS_URL)")
        if not resolved_key:
            raise ConfigurationError("octopusdeploy", "API 키가 없습니다 (OCTOPUS_API_KEY)")
        return OctopusDeployClient(
            resolved_server,
            resolved_key,
            space_id=space or get_octopus_space(),
            session=session,
        )

    return factory
