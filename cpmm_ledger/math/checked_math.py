"""
Checked Math - 부호 없는 정수 폭 검사

풀의 모든 저장 필드는 고정 폭(기본 32비트)의 부호 없는 정수입니다.
중간 곱셈은 Python int(무제한 정밀도)로 계산하고,
저장/반환되는 값만 폭을 검사하여 wrap 대신 Overflow를 발생시킵니다.

핵심 규칙:
    0 <= value <= 2^bits - 1   # 저장 가능한 값
    a * b // d                 # 중간값은 넓은 정수로 계산
"""

from ..constants import DEFAULT_UINT_BITS
from ..errors import Overflow


def uint_max(bits: int = DEFAULT_UINT_BITS) -> int:
    """bits 폭 부호 없는 정수의 최대값"""
    if bits <= 0:
        raise ValueError(f"bits는 양수: {bits}")
    return (1 << bits) - 1


def to_uint(value: int, bits: int = DEFAULT_UINT_BITS, name: str = "amount") -> int:
    """외부 입력을 부호 없는 정수로 검증

    Args:
        value: 검증할 값
        bits: 허용 비트 폭
        name: 오류 메시지에 쓸 인자 이름

    Returns:
        검증된 int

    Raises:
        TypeError: int가 아닌 값 (bool 포함)
        ValueError: 음수
        Overflow: 폭 초과
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name}은 정수여야 함: {value!r}")
    if value < 0:
        raise ValueError(f"{name}은 음수일 수 없음: {value}")
    if value > uint_max(bits):
        raise Overflow(f"{name} exceeds uint{bits}: {value}")
    return value


def check_uint(value: int, bits: int = DEFAULT_UINT_BITS) -> int:
    """계산 결과가 bits 폭에 들어가는지 검사"""
    if value < 0:
        raise Overflow(f"uint{bits} underflow: {value}")
    if value > uint_max(bits):
        raise Overflow(f"uint{bits} overflow: {value}")
    return value


def checked_add(a: int, b: int, bits: int = DEFAULT_UINT_BITS) -> int:
    """a + b, 폭 초과 시 Overflow"""
    return check_uint(a + b, bits)


def checked_sub(a: int, b: int, bits: int = DEFAULT_UINT_BITS) -> int:
    """a - b, 음수면 Overflow"""
    return check_uint(a - b, bits)


def mul_div(a: int, b: int, denominator: int) -> int:
    """(a * b) / denominator 내림

    곱셈은 넓은 정수로 수행되므로 중간값 overflow가 없습니다.
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator는 0이 될 수 없음")
    return (a * b) // denominator
