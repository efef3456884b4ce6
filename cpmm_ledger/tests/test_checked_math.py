"""
Checked Math 테스트

부호 없는 정수 폭 검사 함수들을 테스트합니다.
"""

import pytest

from ..math.checked_math import (
    uint_max,
    to_uint,
    check_uint,
    checked_add,
    checked_sub,
    mul_div,
)
from ..errors import Overflow, PoolError
from ..constants import UINT32_MAX, UINT64_MAX


class TestUintMax:
    """uint_max 테스트"""

    def test_common_widths(self):
        assert uint_max(32) == UINT32_MAX
        assert uint_max(64) == UINT64_MAX

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            uint_max(0)


class TestToUint:
    """외부 입력 검증 테스트"""

    def test_valid_values(self):
        assert to_uint(0) == 0
        assert to_uint(UINT32_MAX) == UINT32_MAX

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            to_uint(-1)

    def test_non_integer_rejected(self):
        """float, bool은 정수로 취급하지 않음"""
        with pytest.raises(TypeError):
            to_uint(1.5)
        with pytest.raises(TypeError):
            to_uint(True)

    def test_width_exceeded(self):
        with pytest.raises(Overflow):
            to_uint(2 ** 32, bits=32)
        assert to_uint(2 ** 32, bits=64) == 2 ** 32


class TestCheckedArithmetic:
    """checked_add, checked_sub, check_uint 테스트"""

    def test_add(self):
        assert checked_add(1, 2) == 3

    def test_add_overflow(self):
        with pytest.raises(Overflow):
            checked_add(UINT32_MAX, 1)

    def test_add_wider_width(self):
        assert checked_add(UINT32_MAX, 1, bits=64) == 2 ** 32

    def test_sub(self):
        assert checked_sub(5, 3) == 2

    def test_sub_underflow(self):
        with pytest.raises(Overflow):
            checked_sub(0, 1)

    def test_check_uint_bounds(self):
        assert check_uint(0) == 0
        with pytest.raises(Overflow):
            check_uint(-1)

    def test_overflow_is_pool_error(self):
        """Overflow는 PoolError이자 ValueError"""
        with pytest.raises(PoolError):
            checked_add(UINT32_MAX, UINT32_MAX)
        with pytest.raises(ValueError):
            checked_add(UINT32_MAX, UINT32_MAX)


class TestMulDiv:
    """mul_div 테스트"""

    def test_wide_intermediate(self):
        """중간 곱이 32비트를 넘어도 결과가 정확함"""
        assert mul_div(UINT32_MAX, UINT32_MAX, UINT32_MAX) == UINT32_MAX

    def test_truncates(self):
        assert mul_div(10, 1, 3) == 3

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            mul_div(1, 1, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
