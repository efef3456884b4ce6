"""
Pool Ledger 오류 타입

모든 오류는 상태 변경 전에 동기적으로 발생합니다.
오류가 발생하면 풀/계정 상태는 변경되지 않습니다.
"""


class PoolError(ValueError):
    """Pool Ledger 오류의 기본 클래스"""

    default_message = "pool error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class ZeroAmount(PoolError):
    """양수가 필요한 곳에 0이 전달됨"""
    default_message = "Amount cannot be zero!"


class InsufficientAmount(PoolError):
    """계정 잔고(토큰 또는 share)가 요청량보다 적음"""
    default_message = "Insufficient amount"


class InsufficientLiquidity(PoolError):
    """요청한 출력량을 풀 reserve가 감당할 수 없음"""
    default_message = "Insufficient pool balance"


class NonEquivalentValue(PoolError):
    """예치한 두 토큰의 비례 기여도가 다름"""
    default_message = "Equivalent value of tokens not provided"


class ThresholdNotReached(PoolError):
    """계산된 share 발행량이 정수 절삭으로 0이 됨"""
    default_message = "Asset value less than threshold for contribution!"


class InvalidShare(PoolError):
    """상환 요청 share가 총 발행 share를 초과"""
    default_message = "Share should be less than total shares"


class ZeroLiquidity(PoolError):
    """풀에 활성 reserve가 없음"""
    default_message = "Zero Liquidity"


class SlippageExceeded(PoolError):
    """계산된 출력량이 호출자의 허용 범위를 벗어남"""
    default_message = "Slippage tolerance exceeded"


class Overflow(PoolError):
    """부호 없는 정수 폭을 벗어나는 연산 (overflow / underflow)"""
    default_message = "Arithmetic overflow"


__all__ = [
    "PoolError",
    "ZeroAmount",
    "InsufficientAmount",
    "InsufficientLiquidity",
    "NonEquivalentValue",
    "ThresholdNotReached",
    "InvalidShare",
    "ZeroLiquidity",
    "SlippageExceeded",
    "Overflow",
]
