"""
Quote Math - 상수곱(constant product) 견적 계산

풀 상태를 읽기만 하는 순수 함수들. 상태를 변경하지 않습니다.
모든 나눗셈은 정수 나눗셈(내림)입니다.

핵심 공식:
    k = reserve_a * reserve_b                     # 상수곱
    eff_in = (1000 - fee) * amount_in / 1000      # 수수료 차감 입력
    new_out = k / (reserve_in + eff_in)           # exact-in
    amount_out = reserve_out - new_out
    new_in = k / (reserve_out - amount_out)       # exact-out
    amount_in = (new_in - reserve_in) * 1000 / (1000 - fee)
"""

from typing import Tuple

from ..constants import (
    BOOTSTRAP_SHARES,
    DEFAULT_UINT_BITS,
    FEE_DENOMINATOR,
)
from ..errors import (
    InsufficientLiquidity,
    InvalidShare,
    NonEquivalentValue,
    ThresholdNotReached,
    ZeroLiquidity,
)
from .checked_math import check_uint, checked_sub, mul_div


def clamp_fee_rate(fee_rate: int) -> int:
    """fee_rate 정규화

    1000 이상은 오류가 아니라 0으로 대체됩니다.
    """
    return 0 if fee_rate >= FEE_DENOMINATOR else fee_rate


def pool_product(reserve_a: int, reserve_b: int) -> int:
    """k = reserve_a * reserve_b (넓은 정수)"""
    return reserve_a * reserve_b


def require_liquidity(reserve_a: int, reserve_b: int) -> None:
    """활성 풀 검사: reserve_a * reserve_b > 0"""
    if pool_product(reserve_a, reserve_b) == 0:
        raise ZeroLiquidity()


def apply_fee(amount: int, fee_rate: int) -> int:
    """수수료 차감 후 유효 입력량 (내림)"""
    return mul_div(FEE_DENOMINATOR - fee_rate, amount, FEE_DENOMINATOR)


def gross_up(amount: int, fee_rate: int) -> int:
    """유효 입력량 → 수수료 포함 명목 입력량 (내림)"""
    return mul_div(amount, FEE_DENOMINATOR, FEE_DENOMINATOR - fee_rate)


def get_spot_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    bits: int = DEFAULT_UINT_BITS
) -> int:
    """수수료를 무시한 현재가 기준 교환량

    공식: amount_out = reserve_out * amount_in / reserve_in

    Args:
        amount_in: 입력 토큰 수량
        reserve_in: 입력 토큰 reserve
        reserve_out: 출력 토큰 reserve
        bits: 결과 비트 폭

    Returns:
        출력 토큰 수량 (정보성 spot 견적)
    """
    require_liquidity(reserve_in, reserve_out)
    return check_uint(mul_div(reserve_out, amount_in, reserve_in), bits)


def get_withdraw_amounts(
    share: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int
) -> Tuple[int, int]:
    """share 상환 시 받을 토큰 수량

    공식: amount_x = reserve_x * share / total_shares

    내림 나눗셈이므로 실제 지분보다 적게 받을 수 있습니다.

    Returns:
        (amount_a, amount_b) 튜플

    Raises:
        ZeroLiquidity: 비활성 풀
        InvalidShare: share > total_shares
    """
    require_liquidity(reserve_a, reserve_b)
    if share > total_shares:
        raise InvalidShare()

    amount_a = mul_div(reserve_a, share, total_shares)
    amount_b = mul_div(reserve_b, share, total_shares)
    return amount_a, amount_b


def get_deposit_shares(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int
) -> int:
    """예치 시 발행할 share 계산

    - 빈 풀 (total_shares == 0): BOOTSTRAP_SHARES 고정
    - 활성 풀: share_x = total_shares * amount_x / reserve_x,
      share_a != share_b 이면 비례 기여가 아님

    Raises:
        ZeroLiquidity: share는 있는데 reserve가 0
        NonEquivalentValue: 두 토큰의 비례 기여가 다름
        ThresholdNotReached: 발행량이 0으로 절삭됨
    """
    if total_shares == 0:
        shares = BOOTSTRAP_SHARES
    else:
        require_liquidity(reserve_a, reserve_b)
        share_a = mul_div(total_shares, amount_a, reserve_a)
        share_b = mul_div(total_shares, amount_b, reserve_b)

        if share_a != share_b:
            raise NonEquivalentValue()
        shares = share_a

    if shares == 0:
        raise ThresholdNotReached()

    return shares


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_rate: int,
    bits: int = DEFAULT_UINT_BITS
) -> int:
    """exact-in 스왑 출력량 (수수료 반영)

    공식:
        eff_in = (1000 - fee) * amount_in / 1000
        new_out = k / (reserve_in + eff_in)
        amount_out = reserve_out - new_out

    정수 절삭으로 가격이 전혀 움직이지 않으면 (new_out == reserve_out)
    출력량에서 1을 뺍니다. 이 경우 출력량이 0이므로 결과는 underflow가 되어
    Overflow가 발생합니다 (무비용 스왑 차단).

    Returns:
        출력 토큰 수량
    """
    require_liquidity(reserve_in, reserve_out)
    effective_in = apply_fee(amount_in, fee_rate)

    new_reserve_out = pool_product(reserve_in, reserve_out) // (reserve_in + effective_in)
    amount_out = reserve_out - new_reserve_out

    if new_reserve_out == reserve_out:
        amount_out = checked_sub(amount_out, 1, bits)

    return check_uint(amount_out, bits)


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    fee_rate: int,
    bits: int = DEFAULT_UINT_BITS
) -> int:
    """exact-out 스왑에 필요한 입력량 (수수료 포함)

    공식:
        new_in = k / (reserve_out - amount_out)
        amount_in = (new_in - reserve_in) * 1000 / (1000 - fee)

    exact-in과 달리 1 단위 보정은 없습니다.

    Raises:
        ZeroLiquidity: 비활성 풀
        InsufficientLiquidity: amount_out이 reserve_out 이상
    """
    require_liquidity(reserve_in, reserve_out)
    if amount_out > reserve_out:
        raise InsufficientLiquidity()
    # Guard against division by zero (draining the whole reserve)
    if amount_out == reserve_out:
        raise InsufficientLiquidity()

    new_reserve_in = pool_product(reserve_in, reserve_out) // (reserve_out - amount_out)
    amount_in = gross_up(new_reserve_in - reserve_in, fee_rate)

    return check_uint(amount_in, bits)
