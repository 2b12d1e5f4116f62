"""
core/config.py - 중앙 설정 관리

리소스 탐색 엔진 전체에서 사용하는 기본값과 환경변수 헬퍼를 제공합니다.

구성:
    - Settings: 불변 설정 데이터클래스 (전역 인스턴스 ``settings``)
    - LogConfig: 로깅 설정 (환경변수 LOG_LEVEL / LOG_FORMAT)
    - get_env_bool / get_env_int: 환경변수 타입 변환
    - get_default_profile / get_default_region: AWS 기본 프로파일/리전
    - get_octopus_server / get_octopus_api_key / get_octopus_space: Octopus Deploy 접속 정보
    - get_version: version.txt 기반 버전 문자열

Usage:
    from core.config import settings, get_default_region

    region = get_default_region()  # "ap-northeast-2"
    limit = settings.WAF_LIST_LIMIT
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """애플리케이션 기본 설정 (불변)

    Attributes:
        DEFAULT_REGION: 리전 미지정 시 사용하는 AWS 리전
        API_TIMEOUT: API 읽기 타임아웃 (초)
        API_CONNECT_TIMEOUT: API 연결 타임아웃 (초)
        MAX_WORKERS: InventoryCollector 병렬 실행 최대 워커 수
        WAF_LIST_LIMIT: WAF Regional List* 호출 1회당 최대 항목 수
        OCTOPUS_PAGE_SIZE: Octopus Deploy 컬렉션 페이지 크기
    """

    DEFAULT_REGION: str = "ap-northeast-2"
    API_TIMEOUT: int = 30
    API_CONNECT_TIMEOUT: int = 10
    MAX_WORKERS: int = 4
    WAF_LIST_LIMIT: int = 100
    OCTOPUS_PAGE_SIZE: int = 30


settings = Settings()


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "INFO"
    # 시간/레벨은 RichHandler가 별도 컬럼으로 출력
    format: str = "[%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """환경변수에서 로깅 설정 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
            date_format=default.date_format,
        )


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    인식할 수 없는 값이면 default를 반환합니다.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.debug("정수가 아닌 환경변수 값 무시: %s=%r", name, value)
        return default


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순으로 기본 프로파일 반환"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE")


def get_default_region() -> str:
    """AWS_REGION → AWS_DEFAULT_REGION → settings.DEFAULT_REGION 순으로 리전 반환"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


def get_octopus_server() -> str | None:
    """OCTOPUS_URL 환경변수"""
    return os.environ.get("OCTOPUS_URL")


def get_octopus_api_key() -> str | None:
    """OCTOPUS_API_KEY 환경변수"""
    return os.environ.get("OCTOPUS_API_KEY")


def get_octopus_space() -> str | None:
    """OCTOPUS_SPACE 환경변수 (없으면 기본 Space)"""
    return os.environ.get("OCTOPUS_SPACE")


# =============================================================================
# 프로젝트 정보
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로"""
    return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt에서 버전 문자열 반환 (없으면 "0.0.0")"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)
        return "0.0.0"
