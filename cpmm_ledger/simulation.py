"""
Trade Simulation - 랜덤 스왑 시뮬레이션

LP 한 명이 유동성을 공급하고, 트레이더 한 명이 무작위 방향/크기의
스왑을 반복하면서 reserve, 출력량, spot 가격, k 변화를 기록합니다.

실패한 스왑은 중단하지 않고 오류 이름과 함께 기록됩니다.
"""

from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from .config import settings
from .errors import PoolError
from .math.quote_math import pool_product
from .pool import Pool

LP_ACCOUNT = "lp"
TRADER_ACCOUNT = "trader"

COLUMNS = [
    "step", "direction", "amount_in", "amount_out",
    "reserve_a", "reserve_b", "k", "spot_price", "error",
]


def _record(step: int, direction: str, amount_in: int, amount_out: int,
            pool: Pool, error: Optional[str]) -> Dict[str, Any]:
    info = pool.pool_info()
    return {
        "step": step,
        "direction": direction,
        "amount_in": amount_in,
        "amount_out": amount_out,
        "reserve_a": info.reserve_a,
        "reserve_b": info.reserve_b,
        "k": pool_product(info.reserve_a, info.reserve_b),
        "spot_price": info.reserve_b / info.reserve_a if info.reserve_a else float("nan"),
        "error": error,
    }


def simulate_random_swaps(
    fee_rate: Optional[int] = None,
    initial_a: int = 1_000_000,
    initial_b: int = 2_000_000,
    n_trades: Optional[int] = None,
    seed: Optional[int] = None,
    max_trade_pct: Optional[float] = None,
    uint_bits: Optional[int] = None
) -> pd.DataFrame:
    """랜덤 스왑 시뮬레이션 실행

    Args:
        fee_rate: 풀 수수료 (parts-per-thousand)
        initial_a: LP 예치 token A (트레이더도 같은 양을 지급받음)
        initial_b: LP 예치 token B
        n_trades: 스왑 횟수 (기본: settings.SIM_TRADES)
        seed: 난수 시드 (기본: settings.SIM_SEED)
        max_trade_pct: 입력 reserve 대비 최대 거래 크기 비율
        uint_bits: 저장 필드 비트 폭

    Returns:
        step 0 (초기 상태) + 스왑별 기록 DataFrame
    """
    n_trades = settings.SIM_TRADES if n_trades is None else n_trades
    seed = settings.SIM_SEED if seed is None else seed
    max_trade_pct = settings.SIM_MAX_TRADE_PCT if max_trade_pct is None else max_trade_pct

    pool = Pool(fee_rate=fee_rate, uint_bits=uint_bits)
    pool.seed_balance(LP_ACCOUNT, initial_a, initial_b)
    pool.deposit(LP_ACCOUNT, initial_a, initial_b)
    pool.seed_balance(TRADER_ACCOUNT, initial_a, initial_b)

    rng = np.random.default_rng(seed)
    rows = [_record(0, "init", 0, 0, pool, None)]

    for step in range(1, n_trades + 1):
        a_for_b = rng.random() < 0.5
        balance = pool.account_balance(TRADER_ACCOUNT)
        info = pool.pool_info()

        if a_for_b:
            reserve_in, available = info.reserve_a, balance.balance_a
        else:
            reserve_in, available = info.reserve_b, balance.balance_b

        size = int(reserve_in * max_trade_pct * rng.random()) + 1
        size = min(size, available)

        try:
            if a_for_b:
                amount_out = pool.swap_a_for_b(TRADER_ACCOUNT, size, 0)
            else:
                amount_out = pool.swap_b_for_a(TRADER_ACCOUNT, size, 0)
            error = None
        except PoolError as e:
            amount_out = 0
            error = type(e).__name__

        direction = "a_for_b" if a_for_b else "b_for_a"
        rows.append(_record(step, direction, size, amount_out, pool, error))

    return pd.DataFrame(rows, columns=COLUMNS)


def summarize_trades(df: pd.DataFrame) -> Dict[str, Any]:
    """시뮬레이션 결과 요약"""
    trades = df[df["direction"] != "init"]
    ok = trades[trades["error"].isna()]

    k_start = int(df["k"].iloc[0])
    k_end = int(df["k"].iloc[-1])

    return {
        "n_trades": len(trades),
        "n_failed": int(trades["error"].notna().sum()),
        "volume_a_in": int(ok.loc[ok["direction"] == "a_for_b", "amount_in"].sum()),
        "volume_b_in": int(ok.loc[ok["direction"] == "b_for_a", "amount_in"].sum()),
        "k_start": k_start,
        "k_end": k_end,
        "k_growth_pct": (k_end - k_start) / k_start * 100 if k_start else 0.0,
        "price_start": float(df["spot_price"].iloc[0]),
        "price_end": float(df["spot_price"].iloc[-1]),
    }
