"""Fee calculation for swap pools.

Usage:
    from swapmath.fees import FeeConfig, require_fee

    fees = FeeConfig(
        admin_trade_fee_numerator=0,
        admin_trade_fee_denominator=1,
        admin_withdraw_fee_numerator=0,
        admin_withdraw_fee_denominator=1,
        trade_fee_numerator=25,
        trade_fee_denominator=10_000,
        withdraw_fee_numerator=0,
        withdraw_fee_denominator=1,
    )
    fee = require_fee(fees.trade_fee(amount_in), "trade_fee")
"""

from swapmath.fees.calculator import FeeCalculator
from swapmath.fees.config import NORMALIZED_FEE_FACTOR, FeeConfig
from swapmath.fees.result import require_fee

__all__ = [
    "FeeCalculator",
    "FeeConfig",
    "NORMALIZED_FEE_FACTOR",
    "require_fee",
]
