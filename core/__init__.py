# core/__init__.py
"""
core - 리소스 탐색 엔진 인프라

아키텍처:
    core/
    ├── inventory/      # 탐색 & 정규화 엔진 (Descriptor, Cursor, Step, Generator, Collector)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_default_region
    region = get_default_region()  # "ap-northeast-2"

    # 탐색
    from core.inventory import InventoryCollector, GeneratorSelection

    # 예외 처리
    from core.exceptions import ConfigurationError, categorize_error
"""

from core import config, exceptions, inventory

__all__: list[str] = [
    "inventory",
    "config",
    "exceptions",
]
