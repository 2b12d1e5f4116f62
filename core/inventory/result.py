"""
core/inventory/result.py - 성공/실패 결과 값

Step과 Generator는 예외를 던지는 대신 ``Ok(value)`` 또는 ``Err(error)``를 반환합니다.
전부 아니면 전무(all-or-nothing) 정책이 제어 흐름이 아닌 반환 값으로 드러나도록 합니다.

Example:
    result = generator.discover()
    if result.is_ok():
        descriptors = result.value
    else:
        logger.warning("탐색 실패: %s", result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """성공 결과"""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """실패 결과

    Attributes:
        error: 원격 클라이언트가 발생시킨 원본 예외 (래핑하지 않음)
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """담긴 예외를 그대로 다시 발생시킵니다."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
