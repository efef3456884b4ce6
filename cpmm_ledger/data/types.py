"""
Pool Ledger 데이터 타입 정의

풀 상태와 계정 상태를 표현하는 타입.
모든 수량 필드는 정수 정밀도를 위해 int 타입 사용.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple


class AccountBalance(NamedTuple):
    """계정 잔고 조회 결과

    - balance_a: 풀에 기여하지 않은 token A
    - balance_b: 풀에 기여하지 않은 token B
    - shares: 보유 share
    """
    balance_a: int
    balance_b: int
    shares: int


class PoolInfo(NamedTuple):
    """풀 상태 조회 결과"""
    reserve_a: int
    reserve_b: int
    total_shares: int
    fee_rate: int


@dataclass
class Account:
    """계정 레코드 (Account Ledger의 값)

    맵에 없는 계정은 모든 필드가 0인 것으로 취급합니다.
    """
    balance_a: int = 0
    balance_b: int = 0
    shares: int = 0

    def to_balance(self) -> AccountBalance:
        return AccountBalance(self.balance_a, self.balance_b, self.shares)


@dataclass(frozen=True)
class PoolSnapshot:
    """특정 시점의 풀 + 전체 계정 상태 사본

    변경 전/후 비교와 share 합계 불변식 검사에 사용합니다.
    """
    info: PoolInfo
    accounts: Dict[str, AccountBalance] = field(default_factory=dict)

    @property
    def share_sum(self) -> int:
        """모든 계정 share의 합 (== info.total_shares 이어야 함)"""
        return sum(balance.shares for balance in self.accounts.values())

    def account(self, account_id: str) -> AccountBalance:
        return self.accounts.get(account_id, AccountBalance(0, 0, 0))
