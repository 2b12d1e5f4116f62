"""
core/inventory/identifier.py - 복합 식별자 생성

전역 고유 ID가 없는 하위 리소스(예: StackSet Instance)를 위해
여러 속성을 고정된 순서로 이어 붙여 하나의 자연 키를 만듭니다.

    composite_id("s1", "111", "us-east-1")  # "s1,111,us-east-1"
    composite_id("s1", None, "us-east-1")   # "s1,,us-east-1"

구분자는 이스케이프하지 않습니다. 구성 요소 값 자체에 쉼표가 들어 있으면
서로 다른 튜플이 같은 문자열이 될 수 있습니다.
"""

from __future__ import annotations

DELIMITER = ","


def composite_id(*components: str | None) -> str:
    """구성 요소를 DELIMITER로 결합

    빈 값이나 None도 자리를 유지합니다 (위치 기반 고정 arity).

    Args:
        *components: 순서가 고정된 구성 요소

    Returns:
        결합된 복합 ID
    """
    if not components:
        raise ValueError("composite_id requires at least one component")
    return DELIMITER.join("" if c is None else str(c) for c in components)


def split_composite_id(value: str, arity: int) -> list[str]:
    """복합 ID를 구성 요소로 분리

    Args:
        value: composite_id()로 만든 문자열
        arity: 기대하는 구성 요소 개수

    Raises:
        ValueError: 구성 요소 개수가 arity와 다를 때
    """
    parts = value.split(DELIMITER)
    if len(parts) != arity:
        raise ValueError(f"복합 ID 구성 요소 개수 불일치: expected {arity}, got {len(parts)} ({value!r})")
    return parts
