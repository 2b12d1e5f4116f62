"""
tests/core/inventory/test_inventory_result.py - Ok / Err 결과 값 테스트
"""

import pytest

from core.inventory.result import Err, Ok


class TestOk:
    """Ok 테스트"""

    def test_ok_flags(self):
        result = Ok([1, 2])
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self):
        assert Ok("value").unwrap() == "value"

    def test_unwrap_or_returns_value(self):
        assert Ok([]).unwrap_or(["default"]) == []


class TestErr:
    """Err 테스트"""

    def test_err_flags(self):
        result = Err(RuntimeError("boom"))
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_reraises_original(self):
        """담긴 예외를 그대로 다시 발생"""
        error = ValueError("original")
        with pytest.raises(ValueError) as exc_info:
            Err(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_or_returns_default(self):
        assert Err(RuntimeError("x")).unwrap_or([]) == []

    def test_pattern_match(self):
        """match 문으로 분기"""
        error = RuntimeError("x")
        match Err(error):
            case Ok(value):
                pytest.fail(f"unexpected Ok: {value}")
            case Err(error=caught):
                assert caught is error
