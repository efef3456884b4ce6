"""
Pool - 상수곱 2자산 유동성 풀 원장

풀 reserve, 총 share, 계정별 잔고를 보관하고
예치(deposit), 상환(withdraw), 양방향 스왑을 수행합니다.

모든 변경 연산은 다음 순서를 따릅니다:
    1. 입력 검증
    2. Quote 계산 (quote_math)
    3. 허용 범위(slippage) 검사 및 폭 검사
    4. 커밋 - 이 단계는 실패하지 않음

따라서 오류가 발생하면 풀/계정 상태는 전혀 변경되지 않습니다.
동시 호출자는 인스턴스 단위로 변경 연산을 직렬화해야 합니다.
"""

from typing import Dict, Iterator, Optional, Tuple

from .config import settings
from .data.types import Account, AccountBalance, PoolInfo, PoolSnapshot
from .errors import (
    InsufficientAmount,
    InsufficientLiquidity,
    SlippageExceeded,
    ZeroAmount,
)
from .math.checked_math import checked_add, checked_sub, to_uint
from .math.quote_math import (
    clamp_fee_rate,
    get_amount_in,
    get_amount_out,
    get_deposit_shares,
    get_spot_amount_out,
    get_withdraw_amounts,
    pool_product,
)


class Pool:
    """상수곱 풀 원장

    인스턴스마다 독립적인 계정 맵을 가지므로 여러 풀이 공존할 수 있습니다.

    사용법:
        pool = Pool.create(fee_rate=3)
        pool.seed_balance("alice", 100, 200)
        shares = pool.deposit("alice", 10, 20)
        amount_b = pool.swap_a_for_b("alice", 5, min_b=1)
    """

    def __init__(self, fee_rate: Optional[int] = None, uint_bits: Optional[int] = None):
        """
        Args:
            fee_rate: 스왑 수수료 (parts-per-thousand). 1000 이상이면 0으로 대체.
                None이면 settings.DEFAULT_FEE_RATE
            uint_bits: 저장 필드 비트 폭. None이면 settings.UINT_BITS
        """
        self.uint_bits = settings.get_uint_bits(uint_bits)
        fee_rate = to_uint(settings.get_fee_rate(fee_rate), self.uint_bits, "fee_rate")

        self.fee_rate = clamp_fee_rate(fee_rate)
        self.reserve_a = 0
        self.reserve_b = 0
        self.total_shares = 0
        self._accounts: Dict[str, Account] = {}

    @classmethod
    def create(cls, fee_rate: int, uint_bits: Optional[int] = None) -> "Pool":
        """새 비활성 풀 생성"""
        return cls(fee_rate=fee_rate, uint_bits=uint_bits)

    # ------------------------------------------------------------------
    # State & accessors
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        """reserve가 모두 양수이면 활성"""
        return pool_product(self.reserve_a, self.reserve_b) > 0

    def _get_account(self, account_id: str) -> Account:
        # get-or-default: 조회만으로 맵에 추가하지 않음
        account = self._accounts.get(account_id)
        if account is None:
            return Account()
        return account

    def _uint(self, value: int, name: str) -> int:
        return to_uint(value, self.uint_bits, name)

    def seed_balance(self, account_id: str, amount_a: int, amount_b: int) -> None:
        """계정의 가용 잔고에 토큰 지급 (테스트/부트스트랩 용도)

        reserve에는 영향이 없습니다.
        """
        amount_a = self._uint(amount_a, "amount_a")
        amount_b = self._uint(amount_b, "amount_b")
        account = self._get_account(account_id)

        balance_a = checked_add(account.balance_a, amount_a, self.uint_bits)
        balance_b = checked_add(account.balance_b, amount_b, self.uint_bits)

        self._accounts[account_id] = Account(balance_a, balance_b, account.shares)

    def account_balance(self, account_id: str) -> AccountBalance:
        """계정의 (balance_a, balance_b, shares). 모르는 계정은 (0, 0, 0)"""
        return self._get_account(account_id).to_balance()

    def pool_info(self) -> PoolInfo:
        """풀의 (reserve_a, reserve_b, total_shares, fee_rate)"""
        return PoolInfo(self.reserve_a, self.reserve_b, self.total_shares, self.fee_rate)

    def accounts(self) -> Iterator[str]:
        """원장에 기록된 계정 ID"""
        return iter(list(self._accounts))

    def snapshot(self) -> PoolSnapshot:
        """현재 풀/계정 상태의 불변 사본"""
        return PoolSnapshot(
            info=self.pool_info(),
            accounts={
                account_id: account.to_balance()
                for account_id, account in self._accounts.items()
            },
        )

    # ------------------------------------------------------------------
    # Quote engine
    # ------------------------------------------------------------------

    def quote_swap_a_to_b_spot(self, amount_b: int) -> int:
        """token B 수량에 해당하는 token A (수수료 무시 spot)

        공식: reserve_a * amount_b / reserve_b
        """
        amount_b = self._uint(amount_b, "amount_b")
        return get_spot_amount_out(amount_b, self.reserve_b, self.reserve_a, self.uint_bits)

    def quote_swap_b_to_a_spot(self, amount_a: int) -> int:
        """token A 수량에 해당하는 token B (수수료 무시 spot)

        공식: reserve_b * amount_a / reserve_a
        """
        amount_a = self._uint(amount_a, "amount_a")
        return get_spot_amount_out(amount_a, self.reserve_a, self.reserve_b, self.uint_bits)

    def quote_withdraw(self, share: int) -> Tuple[int, int]:
        """share 상환 시 받을 (amount_a, amount_b)"""
        share = self._uint(share, "share")
        return get_withdraw_amounts(share, self.reserve_a, self.reserve_b, self.total_shares)

    def quote_swap_a_for_b(self, amount_a: int) -> int:
        """token A 입력에 대한 token B 출력량 (수수료 반영, exact-in)"""
        amount_a = self._uint(amount_a, "amount_a")
        return get_amount_out(
            amount_a, self.reserve_a, self.reserve_b, self.fee_rate, self.uint_bits
        )

    def quote_swap_b_for_a(self, amount_b: int) -> int:
        """token B 수량에 대한 token A 견적 (수수료 포함, exact-out 공식)

        reserve_b에서 amount_b만큼 빠질 때 필요한 token A를 계산합니다.
        A→B 방향과 달리 1 단위 보정이 없습니다.
        """
        amount_b = self._uint(amount_b, "amount_b")
        return get_amount_in(
            amount_b, self.reserve_a, self.reserve_b, self.fee_rate, self.uint_bits
        )

    # ------------------------------------------------------------------
    # Mutation operations
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_amount(balance: int, amount: int) -> None:
        if amount == 0:
            raise ZeroAmount()
        if amount > balance:
            raise InsufficientAmount()

    def deposit(self, account_id: str, amount_a: int, amount_b: int) -> int:
        """유동성 예치

        Args:
            account_id: 계정 ID
            amount_a: 예치할 token A
            amount_b: 예치할 token B

        Returns:
            발행된 share

        Raises:
            ZeroAmount, InsufficientAmount: token A를 먼저, 그 다음 token B 검사
            NonEquivalentValue: 현재 reserve 비율과 다른 예치
            ThresholdNotReached: 발행 share가 0
            Overflow: 저장 폭 초과
        """
        amount_a = self._uint(amount_a, "amount_a")
        amount_b = self._uint(amount_b, "amount_b")
        account = self._get_account(account_id)

        self._validate_amount(account.balance_a, amount_a)
        self._validate_amount(account.balance_b, amount_b)

        shares = get_deposit_shares(
            amount_a, amount_b, self.reserve_a, self.reserve_b, self.total_shares
        )

        reserve_a = checked_add(self.reserve_a, amount_a, self.uint_bits)
        reserve_b = checked_add(self.reserve_b, amount_b, self.uint_bits)
        total_shares = checked_add(self.total_shares, shares, self.uint_bits)
        updated = Account(
            balance_a=account.balance_a - amount_a,
            balance_b=account.balance_b - amount_b,
            shares=checked_add(account.shares, shares, self.uint_bits),
        )

        self.reserve_a = reserve_a
        self.reserve_b = reserve_b
        self.total_shares = total_shares
        self._accounts[account_id] = updated

        return shares

    def withdraw(self, account_id: str, share: int) -> Tuple[int, int]:
        """share 상환

        상환한 share는 총 share와 계정 share 양쪽에서 소각됩니다.

        Returns:
            (amount_a, amount_b) 받은 토큰

        Raises:
            ZeroAmount, InsufficientAmount: 계정 share 검사
            ZeroLiquidity: 비활성 풀
            InvalidShare: share > total_shares
        """
        share = self._uint(share, "share")
        account = self._get_account(account_id)

        self._validate_amount(account.shares, share)
        amount_a, amount_b = get_withdraw_amounts(
            share, self.reserve_a, self.reserve_b, self.total_shares
        )

        updated = Account(
            balance_a=checked_add(account.balance_a, amount_a, self.uint_bits),
            balance_b=checked_add(account.balance_b, amount_b, self.uint_bits),
            shares=account.shares - share,
        )

        self.total_shares -= share
        self.reserve_a -= amount_a
        self.reserve_b -= amount_b
        self._accounts[account_id] = updated

        return amount_a, amount_b

    @staticmethod
    def _check_output(amount_out: int, reserve_out: int, min_out: int) -> None:
        # 출력 reserve가 0이 되면 풀이 한쪽만 비게 됨
        if amount_out >= reserve_out:
            raise InsufficientLiquidity()
        if amount_out < min_out:
            raise SlippageExceeded()

    def swap_a_for_b(self, account_id: str, amount_a: int, min_b: int) -> int:
        """token A → token B 스왑

        입력 전액(수수료 포함)이 reserve_a에 더해집니다.

        Args:
            account_id: 계정 ID
            amount_a: 입력 token A
            min_b: 허용 최소 출력 (slippage bound)

        Returns:
            받은 token B
        """
        amount_a = self._uint(amount_a, "amount_a")
        min_b = self._uint(min_b, "min_b")
        account = self._get_account(account_id)

        self._validate_amount(account.balance_a, amount_a)
        amount_b = get_amount_out(
            amount_a, self.reserve_a, self.reserve_b, self.fee_rate, self.uint_bits
        )
        self._check_output(amount_b, self.reserve_b, min_b)

        reserve_a = checked_add(self.reserve_a, amount_a, self.uint_bits)
        reserve_b = checked_sub(self.reserve_b, amount_b, self.uint_bits)
        updated = Account(
            balance_a=account.balance_a - amount_a,
            balance_b=checked_add(account.balance_b, amount_b, self.uint_bits),
            shares=account.shares,
        )

        self.reserve_a = reserve_a
        self.reserve_b = reserve_b
        self._accounts[account_id] = updated

        return amount_b

    def swap_b_for_a(self, account_id: str, amount_b: int, min_a: int) -> int:
        """token B → token A 스왑

        출력량은 quote_swap_b_for_a와 같은 공식으로 계산됩니다.

        Args:
            account_id: 계정 ID
            amount_b: 입력 token B
            min_a: 허용 최소 출력 (slippage bound)

        Returns:
            받은 token A
        """
        amount_b = self._uint(amount_b, "amount_b")
        min_a = self._uint(min_a, "min_a")
        account = self._get_account(account_id)

        self._validate_amount(account.balance_b, amount_b)
        amount_a = get_amount_in(
            amount_b, self.reserve_a, self.reserve_b, self.fee_rate, self.uint_bits
        )
        self._check_output(amount_a, self.reserve_a, min_a)

        reserve_a = checked_sub(self.reserve_a, amount_a, self.uint_bits)
        reserve_b = checked_add(self.reserve_b, amount_b, self.uint_bits)
        updated = Account(
            balance_a=checked_add(account.balance_a, amount_a, self.uint_bits),
            balance_b=account.balance_b - amount_b,
            shares=account.shares,
        )

        self.reserve_a = reserve_a
        self.reserve_b = reserve_b
        self._accounts[account_id] = updated

        return amount_a

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}> reserve_a={self.reserve_a}, "
            f"reserve_b={self.reserve_b}, total_shares={self.total_shares}, "
            f"fee_rate={self.fee_rate}, k={pool_product(self.reserve_a, self.reserve_b)}"
        )
