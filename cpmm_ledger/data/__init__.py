"""
Data layer for the pool ledger

풀/계정 상태 타입 정의
"""

from .types import Account, AccountBalance, PoolInfo, PoolSnapshot
