"""
Configuration settings for the pool ledger

Loads environment variables and provides default pool parameters.
"""
import os
from dotenv import load_dotenv

from .constants import DEFAULT_UINT_BITS

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Ledger settings"""

    # Pool defaults
    # fee_rate는 parts-per-thousand, 1000 이상이면 Pool 생성 시 0으로 대체됨
    DEFAULT_FEE_RATE: int = int(os.getenv("CPMM_FEE_RATE", 3))
    UINT_BITS: int = int(os.getenv("CPMM_UINT_BITS", DEFAULT_UINT_BITS))

    # Simulation defaults
    SIM_TRADES: int = int(os.getenv("SIM_TRADES", 100))
    SIM_SEED: int = int(os.getenv("SIM_SEED", 42))
    SIM_MAX_TRADE_PCT: float = float(os.getenv("SIM_MAX_TRADE_PCT", 0.05))

    def get_uint_bits(self, bits: int = None) -> int:
        """Resolve the stored-field width, falling back to the configured one"""
        return bits if bits is not None else self.UINT_BITS

    def get_fee_rate(self, fee_rate: int = None) -> int:
        """Resolve the fee rate, falling back to the configured one"""
        return fee_rate if fee_rate is not None else self.DEFAULT_FEE_RATE


# Create global settings instance
settings = Settings()
