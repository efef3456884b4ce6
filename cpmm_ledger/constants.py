"""
Pool Ledger 상수 정의

정수 정밀도 계산을 위한 상수들:
- PRECISION: share 단위의 고정소수점 스케일 (10^6)
- BOOTSTRAP_SHARES: 빈 풀에 최초 예치 시 발행되는 share 수량
- FEE_DENOMINATOR: fee_rate 단위 (parts-per-thousand)
- UINT*_MAX: 저장 필드의 부호 없는 정수 상한
"""

# share 고정소수점 스케일
PRECISION: int = 1_000_000

# 최초 예치 시 예치량과 무관하게 발행되는 share (100 × PRECISION)
BOOTSTRAP_SHARES: int = 100 * PRECISION

# 수수료 단위 (parts-per-thousand)
# 3 = 0.3%, 100 = 10%, 999 = 99.9%
FEE_DENOMINATOR: int = 1000

# 저장 필드 기본 비트 폭
DEFAULT_UINT_BITS: int = 32

# 부호 없는 정수 최대값
UINT32_MAX: int = 2 ** 32 - 1
UINT64_MAX: int = 2 ** 64 - 1
