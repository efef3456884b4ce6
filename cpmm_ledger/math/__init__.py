"""
Math layer for the pool ledger

정수 정밀도의 수학 함수들:
- checked_math: 부호 없는 정수 폭 검사
- quote_math: 상수곱 견적 (spot, 예치, 상환, 스왑)
"""

from .checked_math import (
    uint_max,
    to_uint,
    check_uint,
    checked_add,
    checked_sub,
    mul_div,
)
from .quote_math import (
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
