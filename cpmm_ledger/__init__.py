"""
Constant-Product Pool Ledger

정수 정밀도로 2자산 상수곱(x * y = k) 유동성 풀을 관리하는 라이브러리.
예치/상환에 따른 share 발행·소각과 수수료 반영 스왑을 제공합니다.
"""

__version__ = "0.1.0"

from .constants import PRECISION, BOOTSTRAP_SHARES, FEE_DENOMINATOR
from .errors import (
    PoolError,
    ZeroAmount,
    InsufficientAmount,
    InsufficientLiquidity,
    NonEquivalentValue,
    ThresholdNotReached,
    InvalidShare,
    ZeroLiquidity,
    SlippageExceeded,
    Overflow,
)
from .data.types import AccountBalance, PoolInfo, PoolSnapshot
from .pool import Pool
