#!/usr/bin/env python3
"""
Pool Simulation - 랜덤 스왑 시뮬레이션 실행

Usage:
    # 기본 설정 (fee 0.3%, 100회)
    python scripts/simulate_pool.py

    # 수수료/횟수/시드 지정
    python scripts/simulate_pool.py --fee 10 --trades 500 --seed 7

    # 결과 CSV 저장
    python scripts/simulate_pool.py --output trades.csv
"""
import sys
import argparse
from pathlib import Path

import pandas as pd

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cpmm_ledger.config import settings
from cpmm_ledger.simulation import simulate_random_swaps, summarize_trades


def print_summary(summary: dict, fee_rate: int):
    print("\n" + "=" * 60)
    print(f"SIMULATION RESULTS - fee {fee_rate / 10:.1f}%")
    print("=" * 60)

    print(f"\n🔁 스왑: {summary['n_trades']:,}회 (실패 {summary['n_failed']:,}회)")
    print(f"   A 입력 합계: {summary['volume_a_in']:,}")
    print(f"   B 입력 합계: {summary['volume_b_in']:,}")

    print(f"\n📊 가격 (B per A):")
    print(f"   시작: {summary['price_start']:.6f}")
    print(f"   종료: {summary['price_end']:.6f}")

    print(f"\n💰 k: {summary['k_start']:,} → {summary['k_end']:,} "
          f"({summary['k_growth_pct']:+.4f}%)")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Constant-product pool random swap simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--fee", type=int, default=settings.DEFAULT_FEE_RATE,
                        help="수수료 (parts-per-thousand, 기본: %(default)s)")
    parser.add_argument("--initial-a", type=int, default=1_000_000, help="초기 token A")
    parser.add_argument("--initial-b", type=int, default=2_000_000, help="초기 token B")
    parser.add_argument("--trades", type=int, default=settings.SIM_TRADES, help="스왑 횟수")
    parser.add_argument("--seed", type=int, default=settings.SIM_SEED, help="난수 시드")
    parser.add_argument("--max-trade-pct", type=float, default=settings.SIM_MAX_TRADE_PCT,
                        help="reserve 대비 최대 거래 비율")
    parser.add_argument("--output", type=Path, default=None, help="거래 기록 CSV 경로")
    parser.add_argument("--show", type=int, default=0, help="출력할 마지막 거래 수")

    args = parser.parse_args()

    df = simulate_random_swaps(
        fee_rate=args.fee,
        initial_a=args.initial_a,
        initial_b=args.initial_b,
        n_trades=args.trades,
        seed=args.seed,
        max_trade_pct=args.max_trade_pct,
    )

    print_summary(summarize_trades(df), args.fee)

    if args.show:
        with pd.option_context("display.max_columns", None, "display.width", 120):
            print(df.tail(args.show).to_string(index=False))

    if args.output:
        df.to_csv(args.output, index=False)
        print(f"✅ 거래 기록 저장: {args.output}")


if __name__ == "__main__":
    main()
