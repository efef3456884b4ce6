"""
Quote Math 테스트

상수곱 견적 함수들을 테스트합니다.
"""

import pytest

from ..math.quote_math import (
    clamp_fee_rate,
    pool_product,
    require_liquidity,
    apply_fee,
    gross_up,
    get_spot_amount_out,
    get_withdraw_amounts,
    get_deposit_shares,
    get_amount_out,
    get_amount_in,
)
from ..errors import (
    InsufficientLiquidity,
    InvalidShare,
    NonEquivalentValue,
    Overflow,
    ThresholdNotReached,
    ZeroLiquidity,
)
from ..constants import BOOTSTRAP_SHARES


class TestFee:
    """수수료 관련 함수 테스트"""

    def test_clamp_keeps_valid_rates(self):
        assert clamp_fee_rate(0) == 0
        assert clamp_fee_rate(3) == 3
        assert clamp_fee_rate(999) == 999

    def test_clamp_maps_large_rates_to_zero(self):
        """1000 이상은 오류가 아니라 0"""
        assert clamp_fee_rate(1000) == 0
        assert clamp_fee_rate(5000) == 0

    def test_apply_fee(self):
        # 10% 수수료: 50 -> 45
        assert apply_fee(50, 100) == 45
        assert apply_fee(50, 0) == 50

    def test_apply_fee_truncates(self):
        assert apply_fee(1, 100) == 0

    def test_gross_up(self):
        assert gross_up(45, 100) == 50
        assert gross_up(12, 100) == 13


class TestLiquidityGuard:
    """활성 풀 검사 테스트"""

    def test_active(self):
        require_liquidity(1, 1)
        assert pool_product(10, 20) == 200

    def test_inactive(self):
        with pytest.raises(ZeroLiquidity):
            require_liquidity(0, 0)
        with pytest.raises(ZeroLiquidity):
            require_liquidity(10, 0)


class TestSpotQuote:
    """get_spot_amount_out 테스트"""

    def test_spot(self):
        # reserve_out * amount_in / reserve_in = 10 * 4 / 20
        assert get_spot_amount_out(4, reserve_in=20, reserve_out=10) == 2
        assert get_spot_amount_out(4, reserve_in=10, reserve_out=20) == 8

    def test_spot_zero_liquidity(self):
        with pytest.raises(ZeroLiquidity):
            get_spot_amount_out(4, 0, 0)


class TestWithdrawQuote:
    """get_withdraw_amounts 테스트"""

    def test_pro_rata(self):
        assert get_withdraw_amounts(20_000_000, 10, 20, 100_000_000) == (2, 4)

    def test_full_redemption(self):
        assert get_withdraw_amounts(100_000_000, 10, 20, 100_000_000) == (10, 20)

    def test_rounds_down(self):
        # 10 * 1/3 = 3.33 -> 3
        assert get_withdraw_amounts(1, 10, 20, 3) == (3, 6)

    def test_invalid_share(self):
        with pytest.raises(InvalidShare):
            get_withdraw_amounts(101, 10, 20, 100)

    def test_zero_liquidity_checked_first(self):
        with pytest.raises(ZeroLiquidity):
            get_withdraw_amounts(101, 0, 0, 100)


class TestDepositShares:
    """get_deposit_shares 테스트"""

    def test_bootstrap_independent_of_amounts(self):
        assert get_deposit_shares(10, 20, 0, 0, 0) == BOOTSTRAP_SHARES
        assert get_deposit_shares(1, 7, 0, 0, 0) == BOOTSTRAP_SHARES

    def test_proportional(self):
        assert get_deposit_shares(5, 10, 10, 20, 100_000_000) == 50_000_000

    def test_non_equivalent(self):
        with pytest.raises(NonEquivalentValue):
            get_deposit_shares(5, 11, 10, 20, 100_000_000)

    def test_threshold_not_reached(self):
        # 100 * 1 / 1000 = 0, 100 * 2 / 2000 = 0
        with pytest.raises(ThresholdNotReached):
            get_deposit_shares(1, 2, 1000, 2000, 100)


class TestAmountOut:
    """get_amount_out (exact-in) 테스트"""

    def test_zero_fee_matches_constant_product(self):
        reserve_in, reserve_out, amount_in = 1000, 3000, 7
        expected = reserve_out - (reserve_in * reserve_out) // (reserve_in + amount_in)
        assert get_amount_out(amount_in, reserve_in, reserve_out, 0) == expected

    def test_half_pool(self):
        assert get_amount_out(50, 50, 100, 0) == 50

    def test_fee_reduces_output(self):
        """10% 수수료: 48 < 50"""
        assert get_amount_out(50, 50, 100, 100) == 48

    def test_positive_fee_strictly_smaller(self):
        no_fee = get_amount_out(100, 10_000, 20_000, 0)
        with_fee = get_amount_out(100, 10_000, 20_000, 3)
        assert with_fee < no_fee

    def test_unmoved_price_underflows(self):
        """유효 입력이 0이면 가격이 그대로 -> 1 차감으로 underflow"""
        with pytest.raises(Overflow):
            get_amount_out(1, 50, 100, 100)

    def test_zero_liquidity(self):
        with pytest.raises(ZeroLiquidity):
            get_amount_out(10, 0, 0, 0)


class TestAmountIn:
    """get_amount_in (exact-out) 테스트"""

    def test_zero_fee(self):
        # k = 5000, new_in = 5000 / 80 = 62 -> 12
        assert get_amount_in(20, 50, 100, 0) == 12

    def test_fee_grossed_up(self):
        # 12 * 1000 / 900 = 13
        assert get_amount_in(20, 50, 100, 100) == 13

    def test_no_one_unit_adjustment(self):
        """exact-in과 달리 가격 불변이어도 0을 그대로 반환"""
        assert get_amount_in(0, 50, 100, 0) == 0

    def test_exceeds_reserve(self):
        with pytest.raises(InsufficientLiquidity):
            get_amount_in(101, 50, 100, 0)

    def test_drains_reserve(self):
        with pytest.raises(InsufficientLiquidity):
            get_amount_in(100, 50, 100, 0)

    def test_zero_liquidity(self):
        with pytest.raises(ZeroLiquidity):
            get_amount_in(1, 0, 0, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
